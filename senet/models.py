"""
Senet - Snapshot Models

Pydantic models for handing a game's state to a host (UI, test harness)
and restoring it later in the same process.
"""

from pydantic import BaseModel, Field, field_validator

from senet.engine.base import BOARD_SIZE, Player
from senet.engine.validators import validate_board_codes


def _zero_counts() -> dict[Player, int]:
    return {Player.LIGHT: 0, Player.DARK: 0}


class GameSnapshot(BaseModel):
    """Complete engine state at one moment."""

    board: list[int] = Field(min_length=BOARD_SIZE, max_length=BOARD_SIZE)
    current_player: Player = Player.LIGHT
    dice_value: int = Field(default=0, ge=0, le=4)
    game_over: bool = False
    winner: Player | None = None
    scored: dict[Player, int] = Field(default_factory=_zero_counts)
    lost: dict[Player, int] = Field(default_factory=_zero_counts)

    model_config = {"frozen": True}

    @field_validator("board")
    @classmethod
    def _check_board(cls, value: list[int]) -> list[int]:
        validate_board_codes(value)
        return value
