"""
Senet Game Engine.

Pure Python game logic with zero UI dependencies.
Handles the board, stick throws, move legality, captures and win detection.
"""

from senet.engine.base import (
    BOARD_SIZE,
    HOUSE_OF_WATER,
    PIECES_PER_PLAYER,
    BoardCode,
    MoveOutcome,
    MoveResult,
    Player,
    Square,
    SquareType,
)
from senet.engine.dice import StickThrow
from senet.engine.senet import SenetEngine

__all__ = [
    # Constants
    "BOARD_SIZE",
    "HOUSE_OF_WATER",
    "PIECES_PER_PLAYER",
    # Data Classes
    "MoveResult",
    "Square",
    # Enums
    "BoardCode",
    "MoveOutcome",
    "Player",
    "SquareType",
    # Engine
    "SenetEngine",
    "StickThrow",
]
