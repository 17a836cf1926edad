import io
import random

import pytest

from dsakit.tictactoe_board import Mark
from dsakit.tictactoe_game import Match, main, parse_coordinate

HUMAN_WINS = ["Alice\n", "P\n", "I\n", "1 1\n", "3 3\n", "1 3\n", "1 2\n", "N\n"]
COMPUTER_WINS = ["Bob\n", "P\n", "C\n", "1 2\n", "3 1\n", "n\n"]
DRAW = ["Cy\n", "P\n", "I\n", "2 2\n", "3 3\n", "2 1\n", "1 2\n", "n\n"]


def run(lines, seed=0):
    feed = iter(lines)
    out = []
    match = Match(read=lambda: next(feed, ""), write=out.append, rng=random.Random(seed))
    results = match.play()
    return match, results, "".join(out)


@pytest.mark.parametrize("text, expected", [("1", 0), ("2", 1), ("3", 2)])
def test_parse_coordinate_valid(text, expected):
    assert parse_coordinate(text) == expected


@pytest.mark.parametrize("text", ["0", "4", "a", "12", ""])
def test_parse_coordinate_invalid(text):
    with pytest.raises(ValueError):
        parse_coordinate(text)


def test_human_wins_with_fork():
    match, results, output = run(HUMAN_WINS)
    assert results == [Mark.HUMAN]
    assert "You beat me to it!!!!" in output
    assert "Bye bye Alice" in output
    assert match.player_name == "Alice"


def test_computer_wins_when_not_blocked():
    _, results, output = run(COMPUTER_WINS)
    assert results == [Mark.COMPUTER]
    assert "I, the computer has won possesion of the entire land!!!!" in output
    assert "dare to challenge me again" in output


def test_draw_is_declared_when_human_cannot_win():
    _, results, output = run(DRAW)
    assert results == [None]
    assert "Sad, the government will now take possession..." in output
    assert "Let me check..." in output


def test_replay_runs_another_game():
    lines = DRAW[:-1] + ["y\n"] + ["C\n", "1 2\n", "3 1\n", "n\n"]
    _, results, _ = run(lines)
    assert results == [None, Mark.COMPUTER]


def test_invalid_coordinate_is_asked_again():
    lines = ["Alice\n", "P\n", "I\n", "9\n"] + HUMAN_WINS[3:]
    _, results, output = run(lines)
    assert results == [Mark.HUMAN]
    assert "Invalid input...Please read instructions." in output


def test_taken_cell_is_refused():
    lines = ["Bob\n", "P\n", "C\n", "2 2\n"] + COMPUTER_WINS[3:]
    _, results, output = run(lines)
    assert results == [Mark.COMPUTER]
    assert "I have already played that cell" in output


def test_reading_instructions_shows_story():
    lines = ["Dee\n", "R\n"] + COMPUTER_WINS[2:]
    _, results, output = run(lines)
    assert results == [Mark.COMPUTER]
    assert "900 square meters" in output
    assert "that is Dee." in output


def test_long_name_is_truncated():
    long_name = "N" * 40
    lines = [long_name + "\n"] + COMPUTER_WINS[1:]
    match, _, _ = run(lines)
    assert match.player_name == long_name[:24]


def test_moves_end_up_on_board():
    match, _, _ = run(COMPUTER_WINS)
    assert match.board[0, 1] is Mark.EMPTY  # board is cleared when the session ends
    assert match.board.winner() is None


def test_input_ending_early_raises():
    feed = iter(["Eve\n", "P\n", "I\n", "1 1\n"])
    match = Match(read=lambda: next(feed, ""), write=lambda text: None, rng=random.Random(1))
    with pytest.raises(EOFError):
        match.play()


def test_main_plays_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(HUMAN_WINS)))
    assert main(["--seed", "3"]) == 0
    assert "You beat me to it!!!!" in capsys.readouterr().out


def test_main_reports_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Eve\nP\n"))
    assert main([]) == 1
    assert "Eve" in capsys.readouterr().out