"""
cli.py - Terminal interface for the dropfour game

This module draws the board on an ANSI terminal, reads moves typed by the
players and wires both into the turn engine behind a small command-line
entry point.
"""

import argparse
import sys
from typing import Callable, List, Optional, TextIO

from dropfour.debug import debug, DebugLevel
from dropfour.utils import ROWS, COLS, Coordinate, Player, is_valid_column
from dropfour.game.board import Board, ColumnFull
from dropfour.game.rules import TurnPhase, TurnState, play

# ANSI escape codes for terminal output
COLORS = {
    "BLACK": "\033[30m",
    "GREEN": "\033[32m",
    "BLUE": "\033[34m",
    "MAGENTA": "\033[35m",
    "WHITE": "\033[37m",
    "RESET": "\033[0m"
}
CLEAR_SCREEN = "\033[2J\033[3J\033[H"

PIECE = "●"
HEADER = "+" + "".join(str(c) for c in range(1, COLS + 1)) + "+"
FOOTER = "+" + "-" * COLS + "+"
MARGIN = "|"

PLAYER_COLORS = {
    Player.ONE: "GREEN",
    Player.TWO: "MAGENTA",
    None: "BLACK",
}

QUIT_KEY = "Q"
PROMPT = "Player {player}, enter a column number or [Q]uit: "
INVALID_INPUT_MESSAGE = f"Please enter a positive whole number from 1 - {COLS}"
COLUMN_FULL_MESSAGE = "Column is full. Please try again:"
WIN_MESSAGE = "Player {player} has won!"
TIE_MESSAGE = "It's a tie!"
QUIT_MESSAGE = "Thanks for playing."


class InvalidInput(ValueError):
    """Raised when a line typed at the prompt is neither a column nor the quit key."""


def parse_move(text: str) -> Optional[int]:
    """
    Interpret a line typed at the move prompt.

    Args:
        text: The raw line

    Returns:
        The chosen column (1-indexed), or None for the quit key

    Raises:
        InvalidInput: if the line is not a whole number from 1 to COLS
    """
    text = text.strip().upper()
    if text == QUIT_KEY:
        return None

    if not text.isascii():
        raise InvalidInput(f"Not a column number: {text!r}")
    try:
        column = int(text)
    except ValueError:
        raise InvalidInput(f"Not a column number: {text!r}") from None

    if not is_valid_column(column):
        raise InvalidInput(f"Column {column} is outside 1-{COLS}")
    return column


def status_message(state: TurnState) -> str:
    """The line shown under the board for a state; empty while the game runs."""
    if state.phase == TurnPhase.WON:
        return WIN_MESSAGE.format(player=state.player)
    if state.phase == TurnPhase.TIED:
        return TIE_MESSAGE
    if state.phase == TurnPhase.QUIT:
        return QUIT_MESSAGE
    return ""


class TerminalRenderer:
    """Redraws the whole board frame on every call to draw()."""

    def __init__(self, out: TextIO = None, use_color: bool = True, clear: bool = True):
        self.out = out or sys.stdout
        self.use_color = use_color
        self.clear = clear

    def _paint(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{COLORS[color]}{text}{COLORS['RESET']}"

    def frame(self, board: Board) -> List[str]:
        """
        Build the framed grid, top row first.

        Returns:
            One string per terminal line
        """
        margin = self._paint(MARGIN, "BLUE")
        lines = [self._paint(HEADER, "BLUE")]
        for row in range(1, ROWS + 1):
            cells = []
            for column in range(1, COLS + 1):
                occupant = board.occupant(Coordinate(column, row))
                cells.append(self._paint(PIECE, PLAYER_COLORS[occupant]))
            lines.append(margin + "".join(cells) + margin)
        lines.append(self._paint(FOOTER, "BLUE"))
        return lines

    def draw(self, board: Board, state: TurnState) -> None:
        if self.clear:
            self.out.write(CLEAR_SCREEN)
        for line in self.frame(board):
            print(line, file=self.out)
        print(file=self.out)

        message = status_message(state)
        if message:
            print(self._paint(message, "WHITE"), file=self.out)
        self.out.flush()


class TerminalInput:
    """Prompts the current player until they name a column with room, or quit."""

    def __init__(self, input_fn: Callable[[], str] = None, out: TextIO = None):
        self.input_fn = input_fn or input
        self.out = out or sys.stdout

    def read_move(self, board: Board, player: Player) -> Optional[int]:
        """
        Block until the player enters a playable column or the quit key.

        Args:
            board: Used to reject full columns
            player: Named in the prompt

        Returns:
            A column with room left, or None to quit
        """
        print(PROMPT.format(player=player), file=self.out)
        self.out.flush()

        while True:
            try:
                line = self.input_fn()
            except KeyboardInterrupt:
                debug.info(f"Interrupted at player {player}'s prompt", "cli")
                return None

            try:
                column = parse_move(line)
            except InvalidInput as e:
                debug.debug(str(e), "cli")
                print(INVALID_INPUT_MESSAGE, file=self.out)
                continue

            if column is None:
                return None

            try:
                board.next_drop_row(column)
            except ColumnFull:
                print(COLUMN_FULL_MESSAGE, file=self.out)
                continue

            return column


class SimpleCLI:
    """Command-line entry point for a game between two players at one terminal."""

    def __init__(self):
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog='dropfour',
            description='Two-player drop-four game for the terminal')
        parser.add_argument('--debug', action='store_true',
                            help='Shorthand for --debug-level debug')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging verbosity (default: warning)')
        parser.add_argument('--log-file', default=None,
                            help='Also write log records to this file')
        parser.add_argument('--no-color', action='store_true',
                            help='Draw the board without ANSI colors')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, renderer: TerminalRenderer = None, reader: TerminalInput = None) -> int:
        """
        Play one game to its end.

        Returns:
            The process exit status, 0 for a win, a tie and a quit alike
        """
        if not self.args:
            self.parse_args()

        renderer = renderer or TerminalRenderer(use_color=not self.args.no_color)
        reader = reader or TerminalInput()
        board = Board()

        try:
            final = play(board, renderer, reader)
        except (EOFError, OSError) as e:
            debug.error(f"Terminal input/output failed: {e!r}", "cli")
            raise

        debug.info(f"Finished with {final.result.name} after {len(board.moves_made)} moves", "cli")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.parse_args(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
