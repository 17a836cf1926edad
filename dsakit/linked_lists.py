"""Singly linked lists: an append-only list, a slot-ordered list and weekly helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence, Sized
from typing import Any


class LinkedList:
    """An append-only sequence that keeps values in insertion order."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the tail."""
        self._items.append(value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def display(self) -> str:
        """Return the list as one line, each value followed by a space."""
        return "List : " + "".join(f"{value} " for value in self._items)


class SlotList:
    """Named entries kept ordered by their time slot.

    A new entry goes to the front only when the current first slot is later.
    Otherwise it goes after the last leading entry whose successor's slot is
    earlier than the new one.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[str, int]] = []

    def insert(self, name: str, slot: int) -> None:
        """Insert ``name`` at its place for ``slot``."""
        entry = (name, slot)
        if not self._entries or self._entries[0][1] > slot:
            self._entries.insert(0, entry)
            return
        position = 0
        while position + 1 < len(self._entries) and self._entries[position + 1][1] < slot:
            position += 1
        self._entries.insert(position + 1, entry)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def _format_entry(entry: Any) -> str:
    if isinstance(entry, tuple):
        name, slot = entry
        return f"{name} {slot}   "
    return f"{entry} "


def format_day(day: int, entries: Iterable[Any]) -> str:
    """Return one line listing a day's entries; (name, slot) pairs show their slot."""
    return f"{day} day of week-> " + "".join(_format_entry(entry) for entry in entries)


def busiest_day(days: Sequence[Sized]) -> int:
    """Return the 1-based number of the first day with the most entries (1 if all are empty)."""
    best_index, best_count = 0, 0
    for index, entries in enumerate(days):
        if len(entries) > best_count:
            best_index, best_count = index, len(entries)
    return best_index + 1