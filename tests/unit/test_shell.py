"""
Unit tests for the console shell.

Tests board rendering, command parsing and the interactive loop.
"""
import io

import pytest
from minesweeper import Board, BoardConfig, ConsoleShell, GameState, Outcome, render_board
from minesweeper.shell import CommandError, parse_command


def make_shell(board: Board, script: str) -> ConsoleShell:
    """Shell reading ``script`` and playing on ``board`` first."""
    shell = ConsoleShell(
        BoardConfig(board.width, board.height, board.num_mines),
        stdin=io.StringIO(script),
        stdout=io.StringIO(),
    )
    shell.state = GameState(board=board)
    return shell


# ============================================================================
# Rendering Tests
# ============================================================================

class TestRenderBoard:
    """Test text rendering."""

    def test_hidden_board(self, center_mine_board: Board) -> None:
        assert render_board(center_mine_board) == (
            "  0 1 2\n"
            "0 . . .\n"
            "1 . . .\n"
            "2 . . ."
        )

    def test_revealed_flagged_and_mine(self, corner_mine_board: Board) -> None:
        corner_mine_board.get_cell(0, 0).reveal()
        corner_mine_board.get_cell(1, 1).reveal()
        corner_mine_board.get_cell(0, 1).toggle_flag()
        lines = render_board(corner_mine_board).splitlines()
        assert lines[1] == "0   F ."
        assert lines[2] == "1 . 1 ."

    def test_reveal_all_shows_mines(self, corner_mine_board: Board) -> None:
        lines = render_board(corner_mine_board, reveal_all=True).splitlines()
        assert lines[3] == "2   1 *"


# ============================================================================
# Command Parsing Tests
# ============================================================================

class TestParseCommand:
    """Test input parsing."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("3 4", ("reveal", (3, 4))),
            ("r 0 1", ("reveal", (0, 1))),
            ("REVEAL 2 2", ("reveal", (2, 2))),
            ("f 1 2", ("flag", (1, 2))),
            ("", ("restart", None)),
            ("n", ("restart", None)),
            ("q", ("quit", None)),
            ("?", ("help", None)),
        ],
    )
    def test_valid_commands(self, line: str, expected: tuple) -> None:
        assert parse_command(line) == expected

    @pytest.mark.parametrize("line", ["1", "f 1", "a b", "r 1 2 3", "x 1 2"])
    def test_invalid_commands(self, line: str) -> None:
        with pytest.raises(CommandError):
            parse_command(line)


# ============================================================================
# Shell Loop Tests
# ============================================================================

class TestConsoleShell:
    """Test the interactive loop."""

    def test_reveal_command(self, center_mine_board: Board) -> None:
        shell = make_shell(center_mine_board, "0 0\n")
        shell.run()
        assert center_mine_board.get_cell(0, 0).is_revealed is True
        assert shell.state.outcome == Outcome.PLAYING

    def test_flag_command(self, center_mine_board: Board) -> None:
        shell = make_shell(center_mine_board, "f 1 1\n")
        shell.run()
        assert center_mine_board.get_cell(1, 1).is_flagged is True

    def test_loss_is_reported(self, center_mine_board: Board) -> None:
        shell = make_shell(center_mine_board, "1 1\n")
        outcomes = shell.run()
        assert outcomes == [Outcome.LOST]
        assert "Game Over!" in shell.stdout.getvalue()

    def test_win_is_reported(self, corner_mine_board: Board) -> None:
        shell = make_shell(corner_mine_board, "0 0\n")
        outcomes = shell.run()
        assert outcomes == [Outcome.WON]
        assert "You Win!" in shell.stdout.getvalue()

    def test_moves_ignored_after_round_ends(self, center_mine_board: Board) -> None:
        shell = make_shell(center_mine_board, "1 1\n0 0\nf 0 1\n")
        shell.run()
        assert center_mine_board.get_cell(0, 0).is_hidden is True
        assert center_mine_board.get_cell(0, 1).is_hidden is True

    def test_enter_restarts_after_round_ends(self, center_mine_board: Board) -> None:
        shell = make_shell(center_mine_board, "1 1\n\n")
        shell.run()
        assert shell.state.board is not center_mine_board
        assert shell.state.outcome == Outcome.PLAYING

    def test_restart_ignored_while_playing(self, center_mine_board: Board) -> None:
        shell = make_shell(center_mine_board, "0 0\n\n")
        shell.run()
        assert shell.state.board is center_mine_board

    def test_quit_stops_reading(self, center_mine_board: Board) -> None:
        shell = make_shell(center_mine_board, "q\n0 0\n")
        shell.run()
        assert center_mine_board.get_cell(0, 0).is_hidden is True

    def test_bad_input_keeps_running(self, center_mine_board: Board) -> None:
        shell = make_shell(center_mine_board, "hello\n9 9\n0 0\n")
        shell.run()
        output = shell.stdout.getvalue()
        assert "Expected ROW COL" in output
        assert "off the board" in output
        assert center_mine_board.get_cell(0, 0).is_revealed is True
