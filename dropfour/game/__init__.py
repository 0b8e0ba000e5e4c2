"""
dropfour.game - Core game mechanics

This package contains the board representation, win detection
and the turn state machine.
"""

from dropfour.game.board import Board, ColumnFull
from dropfour.game.rules import TurnPhase, TurnState, apply_move, check_win, play, start_turn

__all__ = ['Board', 'ColumnFull', 'TurnPhase', 'TurnState',
           'apply_move', 'check_win', 'play', 'start_turn']
