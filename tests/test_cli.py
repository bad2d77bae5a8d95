import pytest

from connect_four.interfaces.cli import (SCENARIOS, SimpleCLI, describe_result, main,
                                         parse_moves, replay_moves)
from connect_four.utils import GameResult, Token


@pytest.fixture(autouse=True)
def quiet_logging(debug_manager):
    yield


def test_parse_moves():
    assert parse_moves("3,2, 3,-1") == [3, 2, 3, -1]
    assert parse_moves("") == []


def test_parse_moves_rejects_text():
    with pytest.raises(ValueError):
        parse_moves("3,a")


@pytest.mark.parametrize("name", sorted(SCENARIOS))
def test_scenarios_replay_to_expected_grid(name):
    scenario = SCENARIOS[name]
    board = replay_moves(scenario.moves)
    assert board.render() == scenario.expected
    assert board.is_game_ended() == scenario.ended


def test_describe_result():
    assert describe_result(replay_moves([])) == "in progress"
    assert describe_result(replay_moves([9])) == "ended by invalid move"
    assert describe_result(replay_moves([3, 2, 3, 2, 3, 2, 3])) == "won by O"


def test_replay_command_prints_grid_and_status(capsys):
    assert main(["replay", "--moves", "0,0,1,1,2,2,3"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines()[-2] == "|O|O|O|O| | | |"
    assert out.splitlines()[-1] == "won by O"


def test_replay_command_rejects_bad_moves(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["replay", "--moves", "1,two"])
    assert excinfo.value.code == 2
    assert "invalid --moves" in capsys.readouterr().err


def test_test_all_command_passes(capsys):
    assert main(["test_all"]) == 0
    out = capsys.readouterr().out
    assert "FAIL" not in out
    assert f"{len(SCENARIOS)}/{len(SCENARIOS)} scenarios passed" in out


def test_missing_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_play_until_win(monkeypatch, capsys):
    answers = iter(["3", "oops", "2", "3", "2", "3", "2", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    cli = SimpleCLI()
    assert cli.run(["play"]) == 0

    assert cli.board.game_result == GameResult.WIN
    assert cli.board.winner == Token.O
    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Player O wins!" in out


def test_play_out_of_range_ends_game(monkeypatch, capsys):
    answers = iter(["4", "12"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    cli = SimpleCLI()
    cli.run(["play"])

    assert cli.board.game_result == GameResult.INVALID_MOVE
    assert "Invalid move, the game is over." in capsys.readouterr().out


def test_play_quit(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "q")

    cli = SimpleCLI()
    cli.run(["play"])

    assert not cli.board.is_game_ended()
    assert "Quitting game." in capsys.readouterr().out
