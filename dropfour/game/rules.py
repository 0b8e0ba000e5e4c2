"""
rules.py - Turn engine and win detection for the dropfour game

This module provides:
1. Win detection seeded at the piece just placed
2. The turn state machine (awaiting move, won, tied, quit) and the loop that
   drives it against a renderer and a move reader
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

from dropfour.debug import debug
from dropfour.utils import AXIS_OFFSETS, CONNECT_N, Coordinate, Direction, GameResult, Player
from dropfour.game.board import Board


def scan_axis(board: Board, coordinate: Coordinate, player: Player,
              offsets: List[Tuple[int, int]], break_on_gap: bool = False) -> bool:
    """
    Scan one axis through coordinate for CONNECT_N consecutive pieces.

    Off-board and empty cells are skipped without resetting the run unless
    break_on_gap is set; an opponent's piece always resets it.

    Args:
        board: The board to scan
        coordinate: The cell the axis is anchored on
        player: The player whose run is counted
        offsets: Ordered (column, row) offsets along the axis
        break_on_gap: Reset the run on empty and off-board cells as well

    Returns:
        True as soon as the run reaches CONNECT_N
    """
    count = 0
    for d_column, d_row in offsets:
        occupant = board.occupant(coordinate.offset(d_column, d_row))
        if occupant is None:
            if break_on_gap:
                count = 0
            continue

        if occupant == player:
            count += 1
        else:
            count = 0

        if count == CONNECT_N:
            return True
    return False


def winning_direction(board: Board, coordinate: Coordinate, player: Player,
                      break_on_gap: bool = False) -> Optional[Direction]:
    """Return the first axis through coordinate that holds a win for player."""
    for direction, offsets in AXIS_OFFSETS.items():
        if scan_axis(board, coordinate, player, offsets, break_on_gap):
            return direction
    return None


def check_win(board: Board, coordinate: Coordinate, player: Player,
              break_on_gap: bool = False) -> bool:
    """
    Check if the piece player just placed at coordinate completes four in a row.

    Args:
        board: The board after the piece was placed
        coordinate: Where the piece landed
        player: The player who placed it
        break_on_gap: Use the strict scan, see scan_axis

    Returns:
        True if any axis through coordinate holds a win, False otherwise
    """
    debug.start_timer("win_check")
    direction = winning_direction(board, coordinate, player, break_on_gap)
    debug.end_timer("win_check", "rules")

    if direction is not None:
        debug.debug(f"Win for player {player} at {coordinate} along {direction.name}", "rules")
        return True
    return False


class TurnPhase(Enum):
    AWAITING_MOVE = auto()
    WON = auto()
    TIED = auto()
    QUIT = auto()


@dataclass(frozen=True)
class TurnState:
    """
    Where the game stands between turns.

    player is whose move is awaited, or the winner once phase is WON.
    """
    phase: TurnPhase
    player: Player
    last_move: Optional[Coordinate] = None

    @classmethod
    def initial(cls) -> 'TurnState':
        return cls(TurnPhase.AWAITING_MOVE, Player.ONE)

    def is_terminal(self) -> bool:
        return self.result.is_game_over()

    @property
    def result(self) -> GameResult:
        if self.phase == TurnPhase.WON:
            return GameResult.win_for(self.player)
        if self.phase == TurnPhase.TIED:
            return GameResult.DRAW
        if self.phase == TurnPhase.QUIT:
            return GameResult.QUIT
        return GameResult.IN_PROGRESS


def start_turn(state: TurnState, board: Board) -> TurnState:
    """
    Open a turn: a full board ends the game in a tie before any move is asked for.

    Terminal states are returned unchanged.
    """
    if state.phase == TurnPhase.AWAITING_MOVE and board.is_full():
        debug.info("Board is full, game ends in a tie", "rules")
        return TurnState(TurnPhase.TIED, state.player, state.last_move)
    return state


def apply_move(state: TurnState, board: Board, column: Optional[int]) -> TurnState:
    """
    Apply the current player's move and return the next state.

    Args:
        state: The current state, which must be awaiting a move
        board: The board to drop onto
        column: The column chosen (1-indexed), or None when the player quits

    Returns:
        WON for the mover, QUIT, or AWAITING_MOVE for the other player

    Raises:
        ValueError: if the game is already over
        ColumnFull: if the column has no room; state and board are unchanged
    """
    if state.is_terminal():
        raise ValueError(f"No move can be applied once the game is {state.phase.name}")

    if column is None:
        debug.info(f"Player {state.player} quit", "rules")
        return TurnState(TurnPhase.QUIT, state.player, state.last_move)

    coordinate = board.place(column, state.player)
    debug.debug(f"Player {state.player} dropped into column {column}, landed at {coordinate}", "rules")

    if check_win(board, coordinate, state.player):
        debug.info(f"Player {state.player} wins after {len(board.moves_made)} moves", "rules")
        return TurnState(TurnPhase.WON, state.player, coordinate)

    return TurnState(TurnPhase.AWAITING_MOVE, state.player.other(), coordinate)


def play(board: Board, renderer, reader, state: Optional[TurnState] = None) -> TurnState:
    """
    Run turns until the game reaches a terminal state.

    Args:
        board: The board to play on, normally empty
        renderer: Object with draw(board, state), called once per turn and
            once more for the terminal state
        reader: Object with read_move(board, player) returning a column with
            room left, or None to quit
        state: State to resume from; a fresh game when omitted

    Returns:
        The terminal TurnState
    """
    state = state or TurnState.initial()
    debug.debug(f"Starting game loop in phase {state.phase.name}", "rules")

    while True:
        state = start_turn(state, board)
        renderer.draw(board, state)
        if state.is_terminal():
            debug.info(f"Game over: {state.result.name}", "rules")
            return state

        column = reader.read_move(board, state.player)
        state = apply_move(state, board, column)
