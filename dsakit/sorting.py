"""Classic sorting algorithms. Each returns a new list and leaves its input alone."""

from __future__ import annotations

import heapq
from bisect import insort
from collections.abc import Iterable
from typing import Any


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort ascending by building a max-heap bottom-up and repeatedly extracting the top."""
    heap = list(items)
    size = len(heap)

    for i in range(1, size):
        j = i
        while j > 0 and heap[j] > heap[(j - 1) // 2]:
            parent = (j - 1) // 2
            heap[j], heap[parent] = heap[parent], heap[j]
            j = parent

    for end in range(size - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        j = 0
        while True:
            child = 2 * j + 1
            if child < end - 1 and heap[child] < heap[child + 1]:
                child += 1
            if child < end and heap[j] < heap[child]:
                heap[j], heap[child] = heap[child], heap[j]
            j = child
            if child >= end:
                break
    return heap


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort ascending, partitioning around the first element."""
    values = list(items)
    if len(values) < 2:
        return values
    pivot, *rest = values
    smaller = [value for value in rest if value < pivot]
    larger = [value for value in rest if not value < pivot]
    return quick_sort(smaller) + [pivot] + quick_sort(larger)


def radix_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers by decimal digits, least significant first."""
    values = list(items)
    if not values:
        return values
    if any(value < 0 for value in values):
        raise ValueError("radix sort requires non-negative integers")
    largest = max(values)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in values:
            buckets[(value // place) % 10].append(value)
        values = [value for bucket in buckets for value in bucket]
        place *= 10
    return values


def bucket_sort(items: Iterable[float]) -> list[float]:
    """Sort numbers in [0, 1) by spreading them over one bucket per element."""
    values = list(items)
    count = len(values)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in values:
        index = int(count * value)
        if not 0 <= index < count:
            raise ValueError(f"value {value!r} falls outside the bucket range [0, 1)")
        buckets[index].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def counting_sort(items: Iterable[int]) -> list[int]:
    """Sort integers (negatives allowed) by counting occurrences over their range."""
    values = list(items)
    if not values:
        return values
    low, high = min(values), max(values)
    counts = [0] * (high - low + 1)
    for value in values:
        counts[value - low] += 1
    return [low + offset for offset, seen in enumerate(counts) for _ in range(seen)]


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort ascending by inserting each element after any equal ones already placed."""
    result: list[Any] = []
    for value in items:
        insort(result, value)
    return result


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort ascending by recursively splitting in half and merging."""
    values = list(items)
    if len(values) < 2:
        return values
    mid = (len(values) - 1) // 2 + 1
    return list(heapq.merge(merge_sort(values[:mid]), merge_sort(values[mid:])))


def reverse(items: Iterable[Any]) -> list[Any]:
    """Return the elements in reverse order."""
    return list(items)[::-1]