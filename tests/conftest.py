"""Shared fixtures for the dropfour test suite."""

import pytest

from dropfour.debug import debug, DebugLevel
from dropfour.game.board import Board
from dropfour.utils import Player

# Column order that fills the board row by row without four in a row at any step
TIE_SEQUENCE = [1, 3, 2, 4, 5, 7, 6] * 6


@pytest.fixture(autouse=True)
def reset_debug():
    """Keep logging configuration from leaking between tests."""
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def drop():
    """Drop pieces into columns, alternating players starting with player one."""
    def _drop(board, columns, player=Player.ONE):
        coordinates = []
        for column in columns:
            coordinates.append(board.place(column, player))
            player = player.other()
        return coordinates
    return _drop


@pytest.fixture
def stack():
    """Stack explicit owners, bottom piece first, into each column."""
    def _stack(board, columns):
        for column, owners in columns.items():
            for owner in owners:
                board.place(column, owner)
        return board
    return _stack


class ScriptedReader:
    """Stands in for the terminal: hands out columns (or None) in order."""

    def __init__(self, moves):
        self.moves = list(moves)
        self.prompts = []

    def read_move(self, board, player):
        self.prompts.append((player, len(board)))
        return self.moves.pop(0)


class RecordingRenderer:
    def __init__(self):
        self.states = []

    def draw(self, board, state):
        self.states.append(state)


@pytest.fixture
def scripted_reader():
    return ScriptedReader


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()


@pytest.fixture
def tie_sequence():
    return list(TIE_SEQUENCE)
