"""The noughts-and-crosses board and the computer's choice of move."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

_SIZE = 3

_Cell = tuple[int, int]

# Lines are lists of (column, row) cells.
_ROW_LINES: tuple[tuple[_Cell, ...], ...] = tuple(
    tuple((column, row) for column in range(_SIZE)) for row in range(_SIZE)
)
_COLUMN_LINES: tuple[tuple[_Cell, ...], ...] = tuple(
    tuple((column, row) for row in range(_SIZE)) for column in range(_SIZE)
)
_MAIN_DIAGONAL: tuple[_Cell, ...] = ((0, 0), (1, 1), (2, 2))
_ANTI_DIAGONAL: tuple[_Cell, ...] = ((0, 2), (1, 1), (2, 0))
_ALL_LINES = _ROW_LINES + _COLUMN_LINES + (_MAIN_DIAGONAL, _ANTI_DIAGONAL)

# Cells tried in order before falling back to a random free cell.
_PREFERRED: tuple[_Cell, ...] = ((1, 1), (0, 0), (2, 2), (2, 0), (0, 2))

_ROW_PREFIXES = ("\t\t\t* 1.", "\t\t  Side  * 2.", "\t\t\t* 3.")
_CELL_TEXT = (
    {0: "     |", 1: "  X  |", -1: "  O  |"},
    {0: "        |", 1: "    X   |", -1: "    O   |"},
    {0: "       *", 1: "   X   *", -1: "   O   *"},
)
_ROW_SEPARATOR = "\n\t\t\t*  .----------------------*\n"
_BORDER = "\t\t\t***************************"


class Mark(IntEnum):
    """Contents of a cell: empty, the human's X or the computer's O."""

    EMPTY = 0
    HUMAN = 1
    COMPUTER = -1


class Board:
    """A 3×3 grid addressed by (column, row), both counted from 0."""

    def __init__(self) -> None:
        self._cells: list[list[Mark]] = []
        self.reset()

    def reset(self) -> None:
        """Empty every cell."""
        self._cells = [[Mark.EMPTY] * _SIZE for _ in range(_SIZE)]

    @staticmethod
    def _check(column: int, row: int) -> None:
        if not (0 <= column < _SIZE and 0 <= row < _SIZE):
            raise ValueError(f"cell ({column}, {row}) is off the board")

    def __getitem__(self, cell: _Cell) -> Mark:
        column, row = cell
        self._check(column, row)
        return self._cells[column][row]

    def place(self, column: int, row: int, mark: Mark) -> None:
        """Put ``mark`` in an empty cell."""
        self._check(column, row)
        if self._cells[column][row] is not Mark.EMPTY:
            raise ValueError(f"cell ({column}, {row}) is already taken")
        self._cells[column][row] = Mark(mark)

    def is_free(self, column: int, row: int) -> bool:
        """Return whether the cell is still empty."""
        self._check(column, row)
        return self._cells[column][row] is Mark.EMPTY

    def _sum(self, line: tuple[_Cell, ...]) -> int:
        return sum(int(self._cells[column][row]) for column, row in line)

    def winner(self) -> Optional[Mark]:
        """Return the mark holding three in a line, the human's first; None if nobody."""
        for mark in (Mark.HUMAN, Mark.COMPUTER):
            if any(self._sum(line) == 3 * mark for line in _ALL_LINES):
                return mark
        return None

    def can_still_win(self) -> bool:
        """Return whether the human holds two cells of some line whose third is empty."""
        return any(self._sum(line) == 2 for line in _ALL_LINES)

    def render(self) -> str:
        """Return the board drawing with its Top and Side coordinates."""
        parts = [
            "\n\n\n\n\n",
            "\t\t\t            Top        ",
            "\n" + _BORDER + "\n",
            "\t\t\t*  .  1       2       3   *\n\t\t\t*.........................*\n",
        ]
        for row, prefix in enumerate(_ROW_PREFIXES):
            parts.append(prefix)
            parts.extend(
                _CELL_TEXT[column][int(self._cells[column][row])] for column in range(_SIZE)
            )
            parts.append(_ROW_SEPARATOR if row < _SIZE - 1 else "\n" + _BORDER + "\n")
        return "".join(parts)


@dataclass(frozen=True)
class ComputerMove:
    """The cell the computer played and what it said about it."""

    column: int
    row: int
    message: str


def _blank_index(board: Board, line: tuple[_Cell, ...]) -> int:
    return next(index for index, cell in enumerate(line) if board[cell] is Mark.EMPTY)


def _row_move(board: Board, target: int) -> Optional[ComputerMove]:
    for row, line in enumerate(_ROW_LINES):
        if board._sum(line) != target:
            continue
        column = _blank_index(board, line)
        if target == 2:
            intro = "\n\n\n\t\tYou thought I was not guarding my land on rows!!! You are wrong"
        else:
            intro = "\n\n\n\t\tBad luck !!!you lose with my next move."
        text = f"\n\n\t\t  I choose the top coordinate {column + 1} and side coordinate {row + 1}"
        return ComputerMove(column, row, intro + text)
    return None


def _column_move(board: Board, target: int) -> Optional[ComputerMove]:
    for column, line in enumerate(_COLUMN_LINES):
        if board._sum(line) != target:
            continue
        row = _blank_index(board, line)
        if target == 2:
            message = (
                "\n\n\n\t\t  That was a good try...now check out my move!!!"
                f"\n\n\t\tI choose the top coordinate {column + 1} and side coordinate {row + 1}"
            )
        else:
            message = (
                f"\n\n\n\t\tLet us see what happens if i choose top coordinate {column + 1} "
                f"\n\t\tand side coordinate {row + 1} ...You Loose!!!"
            )
        return ComputerMove(column, row, message)
    return None


def _diagonal_move(board: Board, target: int) -> Optional[ComputerMove]:
    if board._sum(_MAIN_DIAGONAL) == target:
        index = _blank_index(board, _MAIN_DIAGONAL)
        if target == 2:
            intro = (
                "\n\n\n\t\t\t    That was a good try!!!"
                "\n\t\tPlaying that diagonal game with me...now check out my move!!!"
            )
        else:
            intro = (
                "\n\n\n\t\tYou have wasted too much of my time, ...I want to end this..."
                "\n\t\tend this with my next move hahaha"
            )
        text = f"\n\n\n\t\tI chose the top coordinate {index + 1} and side coordinate {index + 1}"
        return ComputerMove(index, index, intro + text)
    if board._sum(_ANTI_DIAGONAL) == target:
        index = _blank_index(board, _ANTI_DIAGONAL)
        column, row = _ANTI_DIAGONAL[index]
        if target == 2:
            lead = "\n\n\t\t" if index == 2 else "\n\n\n\t\t"
            intro = lead + "  That was a good try...now check out my move!!!"
        else:
            indent = "  " if index == 0 else ""
            intro = (
                f"\n\n\n\t\t{indent}That was a good try...\n\t\tPlaying that diagonal game"
                " with me...\n\t\tnow check out my move!!!"
            )
        text = f"\n\n\t\tI choose the top coordinate {column + 1} and side coordinate {row + 1}"
        return ComputerMove(column, row, intro + text)
    return None


def _fallback_move(board: Board, rng: random.Random) -> ComputerMove:
    cell = next((cell for cell in _PREFERRED if board.is_free(*cell)), None)
    if cell is None:
        free = [
            (column, row)
            for column in range(_SIZE)
            for row in range(_SIZE)
            if board.is_free(column, row)
        ]
        if not free:
            raise ValueError("the board is full")
        cell = rng.choice(free)
    column, row = cell
    return ComputerMove(
        column,
        row,
        f"\n\n\t\tI choose the top coordinate {column + 1} and side coordinate {row + 1}",
    )


def computer_move(board: Board, rng: Optional[random.Random] = None) -> ComputerMove:
    """Choose and play the computer's cell on ``board``.

    The computer completes a line of its own if it can, otherwise blocks a line
    where the human holds two cells, checking rows, then columns, then
    diagonals; failing both it takes the centre, then the corners (0,0), (2,2),
    (2,0), (0,2), then any free cell at random.
    """
    rng = rng if rng is not None else random.Random()
    move: Optional[ComputerMove] = None
    for target in (-2, 2):
        for strategy in (_row_move, _column_move, _diagonal_move):
            move = strategy(board, target)
            if move is not None:
                break
        if move is not None:
            break
    if move is None:
        move = _fallback_move(board, rng)
    board.place(move.column, move.row, Mark.COMPUTER)
    return move