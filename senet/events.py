"""
Senet - Game Event Definitions

Event types and payloads describing what a game action did, for hosts that
want to animate or log play without diffing boards.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from senet.engine.base import MoveOutcome, MoveResult, Player


class GameEvent(Enum):
    """Events that can occur during a game."""

    DICE_ROLLED = auto()
    PIECE_MOVED = auto()
    PIECE_CAPTURED = auto()
    PIECE_RESTARTED = auto()
    PIECE_EXITED = auto()
    PIECE_LOST = auto()
    TURN_PASSED = auto()
    GAME_WON = auto()
    GAME_RESET = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    player: Player | None = None
    data: dict[str, Any] = field(default_factory=dict)


_OUTCOME_EVENT_MAP: dict[MoveOutcome, GameEvent] = {
    MoveOutcome.MOVED: GameEvent.PIECE_MOVED,
    MoveOutcome.CAPTURED: GameEvent.PIECE_CAPTURED,
    MoveOutcome.EXITED: GameEvent.PIECE_EXITED,
    MoveOutcome.RESTARTED: GameEvent.PIECE_RESTARTED,
}


def events_for_move(
    result: MoveResult, winner: Player | None = None
) -> list[EventPayload]:
    """
    Expand a completed move into the events it implies.

    Args:
        result: The engine's description of the move
        winner: Winner after the move, if the move ended the game

    Returns:
        The outcome event first, then PIECE_LOST and GAME_WON where they apply
    """
    events = [
        EventPayload(
            event=_OUTCOME_EVENT_MAP[result.outcome],
            player=result.player,
            data={
                "from": result.origin,
                "to": result.landed_on,
                "relocated_to": result.relocated_to,
            },
        )
    ]
    if result.piece_lost:
        events.append(
            EventPayload(event=GameEvent.PIECE_LOST, player=result.relocated)
        )
    if winner is not None:
        events.append(EventPayload(event=GameEvent.GAME_WON, player=winner))
    return events
