import logging

from connect_four.debug import DebugLevel, TRACE
from tests.helpers import play


def test_board_logs_win_at_info(debug_manager, board, caplog):
    debug_manager.configure(level=DebugLevel.INFO)

    with caplog.at_level(logging.INFO, logger="connect_four"):
        play(board, [3, 2, 3, 2, 3, 2, 3])

    assert "[board] Player O connects four" in caplog.messages


def test_invalid_move_logged_at_debug(debug_manager, board, caplog):
    debug_manager.configure(level=DebugLevel.DEBUG)

    with caplog.at_level(logging.DEBUG, logger="connect_four"):
        board.place_token(-3)

    assert "[board] Invalid move in column -3 by O" in caplog.messages
    assert "[board] Game ended by an invalid move" in caplog.messages


def test_level_filters_messages(debug_manager, caplog):
    debug_manager.configure(level=DebugLevel.WARNING)

    with caplog.at_level(TRACE, logger="connect_four"):
        debug_manager.info("hidden")
        debug_manager.warning("shown")

    assert caplog.messages == ["shown"]


def test_component_filter(debug_manager, caplog):
    debug_manager.configure(level=DebugLevel.INFO, components=["cli"])

    with caplog.at_level(logging.INFO, logger="connect_four"):
        debug_manager.info("from board", "board")
        debug_manager.info("from cli", "cli")

    assert caplog.messages == ["[cli] from cli"]


def test_disabled_manager_is_silent(debug_manager, caplog):
    debug_manager.configure(level=DebugLevel.TRACE, enabled=False)

    with caplog.at_level(TRACE, logger="connect_four"):
        debug_manager.error("nothing")

    assert caplog.messages == []


def test_set_from_string(debug_manager):
    assert debug_manager.set_from_string("trace")
    assert debug_manager.level == DebugLevel.TRACE
    assert not debug_manager.set_from_string("verbose")
    assert debug_manager.level == DebugLevel.TRACE


def test_end_timer_without_start(debug_manager):
    assert debug_manager.end_timer("never-started") is None


def test_log_file(debug_manager, tmp_path):
    log_file = tmp_path / "connect_four.log"
    debug_manager.configure(level=DebugLevel.INFO, log_file=str(log_file))

    debug_manager.info("written to file", "cli")
    debug_manager.configure(log_file="")

    assert "[cli] written to file" in log_file.read_text()
