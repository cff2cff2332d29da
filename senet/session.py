"""
Senet - Game Session

Drives an engine the way a front end does: throw, pass automatically when
the throw has no legal move, count moves, and tell listeners what happened.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from senet.config import Settings, get_settings
from senet.engine import Player, SenetEngine
from senet.engine.dice import RandomSource, StickThrow
from senet.events import EventPayload, GameEvent, events_for_move

logger = logging.getLogger(__name__)

Listener = Callable[[EventPayload], None]


@dataclass(frozen=True)
class RollOutcome:
    """
    Result of a session roll.

    Attributes:
        player: Side that threw
        value: Throw value (1-4)
        valid_moves: Squares that could move with this throw
        passed: True if the turn was passed because nothing could move
    """
    player: Player
    value: int
    valid_moves: tuple[int, ...]
    passed: bool = False


class GameSession:
    """Owns one engine and the bookkeeping around it."""

    def __init__(
        self,
        rng: RandomSource | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        if rng is None and self.settings.seed is not None:
            rng = StickThrow.seeded(self.settings.seed).source
        self._engine = SenetEngine(rng)
        self._listeners: list[Listener] = []
        self._move_count = 0

    @property
    def engine(self) -> SenetEngine:
        return self._engine

    @property
    def move_count(self) -> int:
        """Successful moves made since the game started."""
        return self._move_count

    @property
    def winner(self) -> Player | None:
        return self._engine.winner

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def roll(self) -> RollOutcome | None:
        """
        Throw for the current player.

        Refuses (returns None) when the game is over or a throw is still
        waiting to be used.
        """
        engine = self._engine
        if engine.game_over or engine.dice_value != 0:
            logger.debug("Roll refused: game_over=%s pending=%d", engine.game_over, engine.dice_value)
            return None

        player = engine.current_player
        value = engine.roll_dice()
        valid_moves = tuple(engine.get_valid_moves())
        self._emit(EventPayload(
            event=GameEvent.DICE_ROLLED,
            player=player,
            data={"value": value, "valid_moves": list(valid_moves)},
        ))

        passed = False
        if not valid_moves and self.settings.auto_pass:
            engine.pass_turn()
            passed = True
            logger.info("%s threw %d with no legal move, turn passes", player.value, value)
            self._emit(EventPayload(event=GameEvent.TURN_PASSED, player=player))

        return RollOutcome(player=player, value=value, valid_moves=valid_moves, passed=passed)

    def move(self, origin: int) -> bool:
        """Move the current player's piece on `origin`. Returns False if illegal."""
        engine = self._engine
        if not engine.make_move(origin):
            logger.debug("Move from %s rejected", origin)
            return False

        self._move_count += 1
        for payload in events_for_move(engine.last_result, engine.winner):
            self._emit(payload)
        return True

    def pass_turn(self) -> None:
        """Give up the pending throw (for hosts that disable auto_pass)."""
        engine = self._engine
        if engine.dice_value == 0:
            return
        player = engine.current_player
        engine.pass_turn()
        self._emit(EventPayload(event=GameEvent.TURN_PASSED, player=player))

    def new_game(self) -> None:
        """Reset the engine and counters."""
        self._engine.reset()
        self._move_count = 0
        self._emit(EventPayload(event=GameEvent.GAME_RESET))

    def _emit(self, payload: EventPayload) -> None:
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception:
                logger.exception("Listener failed handling %s", payload.event.name)
