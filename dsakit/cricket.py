"""A one-over, four-a-side cricket match decided by chance."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field
from typing import Optional

POOL = (
    "Virat Kohli",
    "Rohit Sharma",
    "Shikhar Dhawan",
    "Rishabh Pant",
    "Dinesh Karthik",
    "KL Rahul",
    "Ravindra Jadeja",
    "Hardik Pandya",
    "jasprit Bumrah",
    "Bhuvneshwar Kumar",
    "Ishant Sharma",
)
PLAYERS_PER_TEAM = 4
MAX_BALLS = 6
MAX_RUNS_PER_BALL = 5


@dataclass(eq=False)
class Player:
    """A player picked from the pool, with batting and bowling figures."""

    name: str
    index: int
    runs_scored: int = 0
    balls_played: int = 0
    balls_bowled: int = 0
    runs_given: int = 0
    wickets_taken: int = 0


@dataclass(eq=False)
class Team:
    """A side with its players and running totals."""

    name: str
    total_runs_scored: int = 0
    wickets_lost: int = 0
    total_balls_bowled: int = 0
    players: list[Player] = field(default_factory=list)


class Game:
    """State of a match between Team-A and Team-B."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.players_per_team = PLAYERS_PER_TEAM
        self.max_balls = MAX_BALLS
        self.pool = POOL
        self.team_a = Team("Team-A")
        self.team_b = Team("Team-B")
        self.batting_team: Optional[Team] = None
        self.bowling_team: Optional[Team] = None
        self.batsman: Optional[Player] = None
        self.bowler: Optional[Player] = None
        self.is_first_innings = False
        self.winner: Optional[Team] = None
        self.drawn = False

    def is_available(self, index: int) -> bool:
        """Return whether pool player ``index`` may still be picked.

        Only Team-A's picks are checked against.
        """
        return all(player.index != index for player in self.team_a.players)

    def add_player(self, team: Team, index: int) -> Player:
        """Add pool player ``index`` to ``team`` and return the new player."""
        if team is not self.team_a and team is not self.team_b:
            raise ValueError("team does not belong to this game")
        if not 0 <= index < len(self.pool):
            raise ValueError("Please select from the given players")
        if not self.is_available(index):
            raise ValueError("Player has already been selected. Choose different player..")
        player = Player(self.pool[index], index)
        team.players.append(player)
        return player

    def toss(self) -> Team:
        """Toss the coin and return the team that won it."""
        return self.team_a if self.rng.randrange(2) == 0 else self.team_b

    def apply_toss(self, winner: Team, bat_first: bool) -> None:
        """Let the toss winner bat first or bowl first."""
        if winner is self.team_a:
            other = self.team_b
        elif winner is self.team_b:
            other = self.team_a
        else:
            raise ValueError("team does not belong to this game")
        if bat_first:
            self.batting_team, self.bowling_team = winner, other
        else:
            self.batting_team, self.bowling_team = other, winner

    def start_innings(self, first: bool) -> str:
        """Begin an innings; the second innings swaps batting and bowling sides.

        Returns the announcement of the opening batsman and bowler.
        """
        if self.batting_team is None or self.bowling_team is None:
            raise RuntimeError("the toss has not been decided")
        self.is_first_innings = first
        if not first:
            self.batting_team, self.bowling_team = self.bowling_team, self.batting_team
        if not self.batting_team.players or not self.bowling_team.players:
            raise RuntimeError("both teams need players")
        self.batsman = self.batting_team.players[0]
        self.bowler = self.bowling_team.players[0]
        return (
            f"{self.batting_team.name} - {self.batsman.name} is batting \n"
            f"{self.bowling_team.name} - {self.bowler.name} is bowling "
        )

    def bowl(self, runs: Optional[int] = None) -> str:
        """Play one ball; zero runs means the batsman is out.

        Without ``runs`` the outcome is drawn at random from 0 to 5.
        Returns the commentary and the scorecard.
        """
        if self.batsman is None or self.bowler is None:
            raise RuntimeError("no innings in progress")
        if runs is None:
            runs = self.rng.randrange(MAX_RUNS_PER_BALL + 1)
        elif not 0 <= runs <= MAX_RUNS_PER_BALL:
            raise ValueError(f"runs must be between 0 and {MAX_RUNS_PER_BALL}")
        batting, bowling = self.batting_team, self.bowling_team
        batsman, bowler = self.batsman, self.bowler

        batsman.runs_scored += runs
        batting.total_runs_scored += runs
        batsman.balls_played += 1
        bowler.balls_bowled += 1
        bowling.total_balls_bowled += 1
        bowler.runs_given += runs

        if runs:
            return f"\n{bowler.name} to {batsman.name} {runs} runs!\n\n{self.scorecard()}"

        batting.wickets_lost += 1
        bowler.wickets_taken += 1
        text = f"\n{bowler.name} to {batsman.name} OUT!\n\n{self.scorecard()}"
        if batting.wickets_lost < len(batting.players):
            self.batsman = batting.players[batting.wickets_lost]
        return text

    def innings_continues(self) -> bool:
        """Return whether the current innings goes on; settles the result when the match ends."""
        batting, bowling = self.batting_team, self.bowling_team
        if batting is None or bowling is None:
            raise RuntimeError("no innings in progress")
        finished = (
            batting.wickets_lost >= self.players_per_team
            or bowling.total_balls_bowled >= self.max_balls
        )
        if self.is_first_innings:
            return not finished
        if batting.total_runs_scored > bowling.total_runs_scored:
            self.winner = batting
            return False
        if finished:
            if batting.total_runs_scored < bowling.total_runs_scored:
                self.winner = bowling
            else:
                self.drawn = True
            return False
        return True

    def scorecard(self) -> str:
        """Return the live score line for the current ball."""
        batting, bowling = self.batting_team, self.bowling_team
        batsman, bowler = self.batsman, self.bowler
        if batting is None or bowling is None or batsman is None or bowler is None:
            raise RuntimeError("no innings in progress")
        return (
            f"{'-' * 85}\n"
            f"\t{batting.name}  {batting.total_runs_scored} - {batting.wickets_lost}"
            f" ({bowling.total_balls_bowled}) | {batsman.name} {batsman.runs_scored}"
            f" ({batsman.balls_played}) \t{bowler.name} {bowler.balls_bowled} -"
            f" {bowler.runs_given} - {bowler.wickets_taken}\t\n"
            f"{'-' * 86}\n"
        )

    def summary(self) -> str:
        """Return the end-of-match figures of both teams."""
        batting, bowling = self.batting_team, self.bowling_team
        if batting is None or bowling is None:
            raise RuntimeError("the match has not started")
        lines = ["\t\t  ||| MATCH ENDS ||| ", ""]
        sides = (
            (batting, bowling.total_balls_bowled, "=" * 49, "|" + "-" * 48 + "|"),
            (bowling, batting.total_balls_bowled, "=" * 49, "|" + "-" * 48 + "|"),
        )
        for team, balls, rule, separator in sides:
            lines.append(
                f"{team.name} {team.total_runs_scored}-{team.wickets_lost} ({balls})"
            )
            lines.append(rule)
            lines.append("| PLAYER \t     BATTING \t   BOWLING    |")
            for position, player in enumerate(team.players[: self.players_per_team]):
                lines.append(separator)
                lines.append(
                    f"| [{position}] {player.name}  \t {player.runs_scored}"
                    f"({player.balls_played}) \t\t {player.balls_bowled}-"
                    f"{player.runs_given}-{player.wickets_taken}\t |"
                )
            lines.append("=" * 48)
            lines.append("")
        return "\n".join(lines)


_RULE = "-" * 75

_WELCOME = "\n".join(
    [
        _RULE,
        _RULE,
        "|                            MINI CRICKET                                 |",
        _RULE,
        _RULE,
        "||                         .....WELCOME.....                             ||",
        _RULE,
        _RULE,
        "                  ::::::::::INSTRUCTIONS::::::::::                         ",
        "",
        "       1) There will be two teams, Team-A and Team-B                       ",
        "       2) Each team will play for one over only.                           ",
        "       3) You are allowed to select 4 players from the pool                ",
        "       4) Each player can be selected only once                            ",
        "       5) This game is entirely based on luck                              ",
        "       6) Hope you will enjoy it...GOOD LUCK!!!                            ",
        _RULE,
        _RULE,
    ]
)


def _pool_listing(game: Game) -> str:
    dots = "." * 53
    lines = ["", dots, "|                Pool of Players                    |", dots]
    lines.extend(f"                 [{index}] {name}" for index, name in enumerate(game.pool))
    lines.append(dots)
    return "\n".join(lines)


def _teams_table(game: Game) -> str:
    lines = [
        "",
        "",
        "------------------------------------\t\t-----------------------------------",
        "|============  Team-A  ============|\t\t|============  Team-B  ============|",
        "------------------------------------\t\t------------------------------------",
    ]
    for position, (first, second) in enumerate(zip(game.team_a.players, game.team_b.players)):
        lines.append(
            f"|\t[{position}] {first.name}\t  |\t\t|\t[{position}] {second.name}\t    |"
        )
    lines.append("------------------------------------\t\t------------------------------------")
    return "\n".join(lines) + "\n"


def _read_int(prompt: str) -> int:
    text = input(prompt)
    while True:
        try:
            return int(text.strip())
        except ValueError:
            text = input("Invalid input! Please try again with valid input: ")


def _select_players(game: Game) -> None:
    print()
    print("------------------------------------------------")
    print("|========== Create Team-A and Team-B ==========|")
    print("------------------------------------------------")
    for number in range(1, game.players_per_team + 1):
        for team, label in ((game.team_a, "A"), (game.team_b, "B")):
            while True:
                index = _read_int(f"\nSelect player {number} of Team {label} - ")
                try:
                    game.add_player(team, index)
                except ValueError as error:
                    print(f"\n{error}")
                else:
                    break


def _decide_toss(game: Game) -> None:
    print()
    print("-----------------------------------")
    print("|========== Let's Toss  ==========|")
    print("-----------------------------------")
    print()
    print("Tossing the coin...\n")
    winner = game.toss()
    print(f"{winner.name} won the toss\n")
    while True:
        choice = _read_int("Enter 1 to bat or 2 to bowl first. \n1. Bat\n2. Bowl \n")
        if choice in (1, 2):
            break
        print("\nInvalid input. Please try again:\n")
    game.apply_toss(winner, bat_first=choice == 1)
    decision = "elected to bat first" if choice == 1 else "choose to bowl first"
    print(f"\n{winner.name} won the toss and {decision}\n")


def _closing_text(game: Game) -> str:
    batting, bowling = game.batting_team, game.bowling_team
    if game.is_first_innings:
        return (
            "\t\t ||| FIRST INNINGS ENDS ||| \n\n"
            f"{batting.name} {batting.total_runs_scored} - {batting.wickets_lost}"
            f" ({bowling.total_balls_bowled})\n"
            f"{bowling.name} needs {batting.total_runs_scored + 1} runs to win the match\n"
        )
    if game.winner is not None:
        return f"{game.winner.name} WON THE MATCH\n"
    return "MATCH DRAW\n"


def _play_innings(game: Game, first: bool) -> None:
    heading = "FIRST INNINGS STARTS" if first else "SECOND INNINGS STARTS"
    print(f"\t\t ||| {heading} ||| \n")
    print(game.start_innings(first))
    print()
    for _ in range(game.max_balls):
        input("Press Enter to bowl...")
        print("Bowling...")
        print(game.bowl())
        if not game.innings_continues():
            print(_closing_text(game))
            break


def main(argv: list[str] | None = None) -> int:
    """Play an interactive match on standard input."""
    parser = argparse.ArgumentParser(prog="cricket", description="Play a mini cricket match.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random outcomes")
    args = parser.parse_args(argv)

    game = Game(random.Random(args.seed))
    try:
        print(_WELCOME)
        input("\nPress Enter to Continue")
        print(_pool_listing(game))
        input("\nPress Enter to Continue")
        _select_players(game)
        print(_teams_table(game))
        input("\nPress Enter to Toss")
        _decide_toss(game)
        _play_innings(game, first=True)
        _play_innings(game, first=False)
        print(game.summary())
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())