"""An interactive noughts-and-crosses match, "War of the Lands", against the computer."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable
from typing import Optional

from dsakit.tictactoe_board import Board, Mark, computer_move

_NAME_LIMIT = 24
_MOVE_LIMIT = 10

_BANNER = "\n".join(
    [
        "\n\n\n\n",
        "**     **  ********  *******",
        "**     **  ********  ********",
        "**     **  **    **  **    **",
        "**  *  **  ********  *******",
        "** *** **  ********  *******",
        "***   ***  **    **  **    **",
        "**     **  **    **  **    **",
        "\n",
        "\t\t********  ********",
        "\t\t********  ********",
        "\t\t**    **  **",
        "\t\t**    **  *****",
        "\t\t**    **  *****",
        "\t\t********  **",
        "\t\t********  **",
        "\n",
        "\t\t\t********  **    **  ********",
        "\t\t\t********  **    **  ********",
        "\t\t\t   **     ********  **",
        "\t\t\t   **     ********  *****",
        "\t\t\t   **     **    **  **",
        "\t\t\t   **     **    **  ********",
        "\t\t\t   **     **    **  ********",
        "\n",
        "\t\t\t       **        ********  **    **  *******    *******",
        "\t\t\t       **        ********  ***   **  ********  ********",
        "\t\t\t       **        **    **  ****  **  **    **   **",
        "\t\t\t       **        ********  ** ** **  **    **    **",
        "\t\t\t       **        ********  **  ****  **    **      **",
        "\t\t\t       ********  **    **  **   ***  ********  ********",
        "\t\t\t       ********  **    **  **    **  *******   *******",
    ]
)

_STORY_OPENING = (
    "\n\n     A disputed area of 900 square meters lies between two neighboring villages. "
    "\n     The dispute between the neighboring villages has been running for  "
    "\n     generations. The government has finally taken a decision to resolve  "
    "\n     the dispute and grant the possession of this land to one of the "
    "\n     villages using a fair method. "
    "\n\n\n     The government has divided the disputed land into 9 equal square plots each"
    "\n     of 300 square meters as shown in the following figure:"
)

_STORY_RULES = (
    "\n\n     The following method will be used to grant possession of the land to "
    "\n     one of the villages: "
    "\n\n     The government has decided that the entire land will be given to the "
    "\n     village that makes three successful plantations."
    "\n\n     At one point of time, only one village will plant vegetation on a "
    "\n     square plot. Each village will be given a fair chance to grow "
    "\n     vegetation in a square block, turn-by-turn."
    "\n\n     The first village that will plant vegetation on three square plots"
    "\n     from one corner to the opposite corner (vertically, horizontally,"
    "\n     or diagonally) will be given possession. For example,"
    "\n     on plots (1,1), (2,2) and (3,3) or (2,1), (2,2), and (2, 3) and so on"
    "\n\n     Each village can plant in a way to block the other village from planting"
    "\n     vegetation in three consecutive plots of land."
    "\n\n     In case all the plots have been planted and neither village has planted"
    "\n     threeconsecutive plots of land, the government holds"
    "\n     possession of the entire land. Both villages will be then"
    "\n     given another chance to restart the plantation all over again."
)

_INVALID_COORDINATE = (
    "\n\n\t\t  \a\a\aInvalid input...Please read instructions. "
    "\n\t\t  Input can only be 1, 2, or 3!!!\n\t\t\t  Try Again!"
)


def parse_coordinate(text: str) -> int:
    """Turn a coordinate '1', '2' or '3' into a 0-based index."""
    if len(text) != 1 or text not in "123":
        raise ValueError(f"coordinate must be 1, 2 or 3, not {text!r}")
    return int(text) - 1


def _stdin_line() -> str:
    return sys.stdin.readline()


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class Match:
    """A session of games between a human and the computer over text input and output.

    ``read`` returns the next line of input, or an empty string at the end of
    input; ``write`` sends text to the player.
    """

    def __init__(
        self,
        read: Optional[Callable[[], str]] = None,
        write: Optional[Callable[[str], None]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._read = read if read is not None else _stdin_line
        self._write = write if write is not None else _stdout_write
        self.rng = rng if rng is not None else random.Random()
        self.board = Board()
        self.player_name = ""
        self._buffer = ""

    def _fill(self) -> None:
        line = self._read()
        if not line:
            raise EOFError("input ended")
        self._buffer += line if line.endswith("\n") else line + "\n"

    def _read_char(self) -> str:
        """Return the next non-blank character of input."""
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped[1:]
                return stripped[0]
            self._buffer = ""
            self._fill()

    def _read_line(self) -> str:
        """Return the rest of the current line of input."""
        if not self._buffer:
            self._fill()
        line, _, self._buffer = self._buffer.partition("\n")
        return line

    def _ask_coordinate(self, prompt: str) -> int:
        while True:
            self._write(prompt)
            try:
                return parse_coordinate(self._read_char())
            except ValueError:
                self._write(_INVALID_COORDINATE)

    def _human_move(self) -> None:
        while True:
            column = self._ask_coordinate("\n\n\n\n\t\t     Choose a top coordinate (1, 2, 3): ")
            row = self._ask_coordinate("\n\n\t\t     Choose a side coordinate (1, 2, 3): ")
            taken_by = self.board[column, row]
            if taken_by is Mark.EMPTY:
                break
            if taken_by is Mark.COMPUTER:
                self._write("\n\n\t      I have already played that cell, Chose another cell.\n\n")
            else:
                self._write(
                    "\n\n\t\tDo you want to keep choosing the same cell...\n\t\t    You have "
                    "already played with this cell. \n\n\t\t\t    Chose another cell!!!"
                )
        self.board.place(column, row, Mark.HUMAN)

    def _announce(self, text: str) -> None:
        self._write(self.board.render())
        self._write("\n" * 13 + text)
        self._write(self.board.render())

    def _government_wins(self) -> None:
        self._write(self.board.render())
        self._write("\n\n\n\t\tSad, the government will now take possession...")

    def _play_game(self, human_first: bool) -> Optional[Mark]:
        """Play one game on a fresh board; return the winning mark, or None for no winner."""
        self.board.reset()
        turn = Mark.HUMAN if human_first else Mark.COMPUTER
        moves = 1
        while True:
            self._write(self.board.render())
            if turn is Mark.HUMAN:
                self._write(f"\n\n\t\t\t{self.player_name} , make your move now!!!")
                self._human_move()
                moves += 1
                turn = Mark.COMPUTER
                if self.board.winner() is Mark.HUMAN:
                    self._announce("\t\t\t   You beat me to it!!!!")
                    return Mark.HUMAN
            if moves < _MOVE_LIMIT and turn is Mark.COMPUTER:
                move = computer_move(self.board, self.rng)
                self._write(move.message)
                if self.board.winner() is Mark.COMPUTER:
                    self._announce("\t\tI, the computer has won possesion of the entire land!!!!")
                    return Mark.COMPUTER
                moves += 1
                turn = Mark.HUMAN
            if moves == _MOVE_LIMIT - 1:
                self._write(
                    "\n\n\n\t       Well, I think we are both are not going to be "
                    "\n\t       successful...Let me check..."
                )
                if not self.board.can_still_win():
                    self._government_wins()
                    return None
            if moves == _MOVE_LIMIT:
                self._government_wins()
                return None

    def _play_again_prompt(self, outcome: Optional[Mark]) -> str:
        name = self.player_name
        if outcome is Mark.HUMAN:
            return (
                f"\n\n\n\t\t\tI need to play again with you, {name} !!!"
                "\n\t\t\tPlease challenge me again....(Y/N)? "
            )
        if outcome is Mark.COMPUTER:
            return (
                f"\n\n\n\n\n\n\n\n\t\t\tIf {name}, you feel you have been cheated, "
                "\n\t\t\tdare to challenge me again....(Y/N)? "
            )
        return "\n\n\n\t\tDo you want us to play again....(Y/N)? "

    def _introduce(self) -> None:
        self._write(_BANNER)
        self._write("\n\n\n\n\n\t\t    Welcome to the game WAR OF THE LANDS.\n\n\t\t")
        self._write("\n\t\t    Please enter your name : ")
        self.player_name = self._read_line()[:_NAME_LIMIT]
        self._write(
            f"\nHello {self.player_name}, I need to tell you the story of War of the Lands. "
            "\nDo you want to read the instructions or simply proceede with the game ? "
            "\n(R)ead or (P)roceede :"
        )
        if self._read_char() in "Rr":
            self.board.reset()
            self._write(_STORY_OPENING)
            self._write(self.board.render())
            self._write(_STORY_RULES)
            self._write(
                "\n\n     In the current scenario, one village is represented by I, the computer"
                f"\n     and the other village is by you, that is {self.player_name}."
                "\n     The decision that who makes the first move lies with the you."
                "\n     Your plantation will be represented by 'X' on the plot of land"
                "\n     and the computer's by 'O'."
                "\n\n     Each player will choose a plot of land by selecting the top and left"
                "\n     coordinate pointing to the specific plot of land."
            )

    def play(self) -> list[Optional[Mark]]:
        """Run the whole session and return each game's winner (None for no winner).

        Raises EOFError if the input ends before the player leaves.
        """
        self._introduce()
        results: list[Optional[Mark]] = []
        again = True
        while again:
            self._write(
                f"\n\n    So, {self.player_name}, do you want to make the first move or "
                "\n    Should I make the first move?"
                "\n    Enter (C) if you want me to begin , else press (I): "
            )
            human_first = self._read_char() not in "Cc"
            outcome = self._play_game(human_first)
            results.append(outcome)
            self._write(self._play_again_prompt(outcome))
            again = self._read_char() in "Yy"
        self.board.reset()
        self._write(f"\n\n\n\n\n\n\n\n\n\t\tBye bye {self.player_name} !!! See you soon...\n\n")
        return results


def main(argv: list[str] | None = None) -> int:
    """Play War of the Lands on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="war-of-the-lands", description="Play noughts and crosses against the computer."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the computer's choices")
    args = parser.parse_args(argv)

    match = Match(rng=random.Random(args.seed))
    try:
        match.play()
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())