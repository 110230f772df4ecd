"""
Text console shell for Minesweeper.

Draws the board as text, turns typed commands into reveal/flag calls and
handles restart/quit once a round has ended.
"""
import random
import sys
from typing import List, Optional, TextIO, Tuple

from .board import Board, BoardConfig
from .cell import CellState
from .engine import GameState, Outcome, new_session


HELP_TEXT = (
    "Commands: ROW COL (or r ROW COL) reveal, f ROW COL flag, "
    "q quit, ? help"
)
ROUND_OVER_TEXT = "Press Enter to restart, q to quit"


# ============================================================================
# Rendering
# ============================================================================

def render_cell(board: Board, row: int, col: int, reveal_all: bool = False) -> str:
    """
    Render a single cell as one character.

    Args:
        board: Board holding the cell.
        row: Row index.
        col: Column index.
        reveal_all: Show mines and counts of hidden cells too.

    Returns:
        ``.`` hidden, ``F`` flagged, ``*`` mine, `` `` empty, or the count.
    """
    cell = board.get_cell(row, col)
    if cell.state == CellState.FLAGGED and not reveal_all:
        return "F"
    if cell.state == CellState.HIDDEN and not reveal_all:
        return "."
    if cell.is_mine:
        return "*"
    if cell.adjacent_mines == 0:
        return " "
    return str(cell.adjacent_mines)


def render_board(board: Board, reveal_all: bool = False) -> str:
    """Render board as text with row and column headers."""
    label_width = len(str(board.height - 1))
    col_labels = " ".join(str(col % 10) for col in range(board.width))
    lines = [" " * (label_width + 1) + col_labels]
    for row in range(board.height):
        cells = " ".join(
            render_cell(board, row, col, reveal_all) for col in range(board.width)
        )
        lines.append(f"{row:>{label_width}} {cells}")
    return "\n".join(lines)


# ============================================================================
# Command Parsing
# ============================================================================

class CommandError(ValueError):
    """Raised for input the shell cannot understand."""


def parse_command(line: str) -> Tuple[str, Optional[Tuple[int, int]]]:
    """
    Parse one line of player input.

    Args:
        line: Raw input line.

    Returns:
        Tuple of (action, position) where action is one of ``reveal``,
        ``flag``, ``restart``, ``quit`` or ``help``. Position is None for
        actions that take no coordinate.

    Raises:
        CommandError: If the line is not a valid command.
    """
    tokens = line.strip().lower().split()
    if not tokens:
        return "restart", None

    head = tokens[0]
    if head in ("q", "quit", "exit"):
        return "quit", None
    if head in ("n", "new", "restart"):
        return "restart", None
    if head in ("?", "h", "help"):
        return "help", None

    if head in ("r", "reveal"):
        action, args = "reveal", tokens[1:]
    elif head in ("f", "flag"):
        action, args = "flag", tokens[1:]
    else:
        action, args = "reveal", tokens

    if len(args) != 2:
        raise CommandError(f"Expected ROW COL, got {line.strip()!r}")
    try:
        row, col = int(args[0]), int(args[1])
    except ValueError:
        raise CommandError(
            f"Coordinates must be integers, got {line.strip()!r}"
        ) from None
    return action, (row, col)


# ============================================================================
# Console Shell
# ============================================================================

class ConsoleShell:
    """
    Interactive text front-end for one player.

    Moves are only accepted while the round is in progress. After a win
    or loss the full board is shown and the player may restart (empty
    line or ``n``) or quit.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the shell.

        Args:
            config: Board configuration for every round.
            stdin: Stream to read commands from (default: sys.stdin).
            stdout: Stream to draw to (default: sys.stdout).
            rng: Random source for mine placement.
        """
        self.config = config or BoardConfig()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.rng = rng
        self.state = self._new_state()
        self.rounds: List[Outcome] = []

    def _new_state(self) -> GameState:
        return new_session(
            self.config.width, self.config.height, self.config.num_mines, self.rng
        )

    def _print(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def draw(self) -> None:
        """Draw the board and status line."""
        self._print(render_board(self.state.board, reveal_all=self.state.is_over))
        if self.state.is_won:
            self._print("You Win!")
            self._print(ROUND_OVER_TEXT)
        elif self.state.is_lost:
            self._print("Game Over!")
            self._print(ROUND_OVER_TEXT)

    def handle(self, line: str) -> bool:
        """
        Apply one line of input.

        Args:
            line: Raw input line.

        Returns:
            False when the player asked to quit, True otherwise.
        """
        try:
            action, position = parse_command(line)
        except CommandError as exc:
            self._print(str(exc))
            self._print(HELP_TEXT)
            return True

        if action == "quit":
            return False
        if action == "help":
            self._print(HELP_TEXT)
            return True
        if action == "restart":
            if self.state.is_over:
                self.state = self._new_state()
            return True

        if self.state.is_over:
            self._print(ROUND_OVER_TEXT)
            return True

        row, col = position
        if not self.state.board.in_bounds(row, col):
            self._print(f"({row}, {col}) is off the board")
            return True
        if action == "flag":
            self.state.flag(row, col)
        else:
            outcome = self.state.reveal(row, col)
            if outcome != Outcome.PLAYING:
                self.rounds.append(outcome)
        return True

    def run(self) -> List[Outcome]:
        """
        Run the input loop until quit or end of input.

        Returns:
            Outcomes of every finished round, in order.
        """
        self._print(HELP_TEXT)
        self.draw()
        for line in self.stdin:
            if not self.handle(line):
                break
            self.draw()
        return self.rounds
