from __future__ import annotations

import random

import pytest

from alugard.engine.models import GameState, OctagonCell, PuzzlePiece, StartGame
from alugard.puzzle.store import GameStore
from alugard.puzzle.reducer import game_reducer, initial_state
from alugard.puzzle.tessellation import build_grid


@pytest.fixture
def grid_2x2() -> list[OctagonCell]:
    """The 2x2 grid with s=40 on a 200x200 board."""
    return build_grid(2, 2, 40, 200, 200)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def started_2x2(grid_2x2) -> GameState:
    """A freshly started 2x2 game with every piece in the tray."""
    pieces = [PuzzlePiece(id=cell.id) for cell in grid_2x2]
    return game_reducer(
        initial_state(),
        StartGame(grid=grid_2x2, pieces=pieces, side_length=40),
    )


@pytest.fixture
def store_2x2(started_2x2) -> GameStore:
    return GameStore(started_2x2)
