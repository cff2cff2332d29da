"""
Senet - Test Configuration and Fixtures

Common fixtures and board builders for all test modules.
"""

from itertools import cycle
from typing import Callable, Iterable

import pytest

from senet.config import Settings
from senet.engine import Player, SenetEngine


# =============================================================================
# RANDOM SOURCES
# =============================================================================

# Draws that map onto each throw value via floor(r * 4) + 1
THROW_DRAWS: dict[int, float] = {1: 0.0, 2: 0.25, 3: 0.5, 4: 0.75}


def _source(values: Iterable[float]) -> Callable[[], float]:
    it = cycle(values)
    return lambda: next(it)


@pytest.fixture
def throws() -> Callable[..., Callable[[], float]]:
    """
    Factory for a random source that yields the given throw values in turn.

    Example: throws(1, 4) produces draws giving 1, 4, 1, 4, ...
    """
    def factory(*values: int) -> Callable[[], float]:
        return _source(THROW_DRAWS[v] for v in values)
    return factory


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def engine() -> SenetEngine:
    """Fresh engine whose every throw is a 1."""
    return SenetEngine(rng=lambda: 0.0)


@pytest.fixture
def position() -> Callable[..., SenetEngine]:
    """
    Factory for an engine set up on an arbitrary position.

    Args (keyword):
        light: Squares holding LIGHT pieces
        dark: Squares holding DARK pieces
        dice: Pending throw (0 for none)
        to_move: Side to move
    """
    def factory(
        light: Iterable[int] = (),
        dark: Iterable[int] = (),
        dice: int = 0,
        to_move: Player = Player.LIGHT,
    ) -> SenetEngine:
        eng = SenetEngine(rng=lambda: 0.0)
        for square in eng.board:
            square.occupant = None
        for i in light:
            eng.board[i].occupant = Player.LIGHT
        for i in dark:
            eng.board[i].occupant = Player.DARK
        eng.current_player = to_move
        eng.set_dice_value(dice)
        return eng
    return factory


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, debug=False, log_level="INFO", auto_pass=True, seed=None)


# =============================================================================
# BOARD DATA
# =============================================================================

@pytest.fixture
def initial_board() -> list[int]:
    """Board codes of a freshly built game."""
    return (
        [1] * 5
        + [2] * 5
        + [0] * 4
        + [3]
        + [0] * 10
        + [4, 5, 6, 7]
        + [0]
    )
