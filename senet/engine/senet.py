"""
Senet - Game Engine

Two-player race along a 30-square track.

Game Rules:
- LIGHT starts on squares 0-4, DARK on 5-9; LIGHT moves first
- Throw the sticks (1-4), then move one of your pieces that many squares
- You may not land on your own piece
- Landing on an opponent sends that piece back to the first empty square of
  its owner's restart range (LIGHT 0-9, DARK 5-14)
- The House of Water (square 26) must be entered empty, and a piece that
  enters it is sent back to its own restart range instead of staying
- Any throw that carries a piece past square 29 takes it off the board
- The first side with no pieces left on the board wins

Unlike the other engine helpers this class keeps state: each instance owns
one game and is mutated in place by every call.
"""

import logging

from senet.engine.base import (
    BOARD_SIZE,
    HOUSE_OF_WATER,
    MoveOutcome,
    MoveResult,
    PieceTally,
    Player,
    Square,
    SquareType,
    build_board,
    player_for_code,
)
from senet.engine.dice import RandomSource, StickThrow
from senet.engine.validators import (
    validate_board_codes,
    validate_dice_value,
    validate_outcome,
    validate_piece_counts,
)
from senet.models import GameSnapshot

logger = logging.getLogger(__name__)


class SenetEngine:
    """Rule engine owning the board, turn state and game outcome."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._sticks = StickThrow(rng)
        self._setup()

    def _setup(self) -> None:
        self.board: list[Square] = build_board()
        self.current_player = Player.LIGHT
        self.dice_value = 0
        self.game_over = False
        self.winner: Player | None = None
        self.last_result: MoveResult | None = None
        self._tally = PieceTally()

    # -- Queries -------------------------------------------------------------

    def get_board(self) -> list[int]:
        """Flattened board: one code per square (see BoardCode)."""
        return [int(square.encode()) for square in self.board]

    def square_type(self, index: int) -> SquareType:
        """Fixed tag of a square. Raises IndexError outside 0-29."""
        return self._square(index).square_type

    def occupant(self, index: int) -> Player | None:
        """Side standing on a square. Raises IndexError outside 0-29."""
        return self._square(index).occupant

    def pieces_on_board(self, player: Player) -> int:
        return sum(1 for square in self.board if square.occupant is player)

    def pieces_scored(self, player: Player) -> int:
        return self._tally.scored[player]

    def pieces_lost(self, player: Player) -> int:
        return self._tally.lost[player]

    def destination(self, origin: int) -> int:
        """Square a piece on `origin` would reach with the pending throw."""
        return origin + self.dice_value

    def can_move(self, origin: int) -> bool:
        """
        Check whether the piece on `origin` may move with the pending throw.

        Out-of-range squares, squares not holding the current player's piece,
        a finished game and a missing throw all simply answer False.
        """
        if not self._on_board(origin) or self.game_over:
            return False

        if self.board[origin].occupant is not self.current_player:
            return False

        if self.dice_value == 0:
            return False

        target = origin + self.dice_value
        if target >= BOARD_SIZE:
            # Any overshoot bears the piece off
            return True

        dest = self.board[target]
        if dest.occupant is self.current_player:
            return False

        # The House of Water must be entered empty
        if target == HOUSE_OF_WATER and dest.occupant is not None:
            return False

        return True

    def get_valid_moves(self) -> list[int]:
        """Ascending list of squares whose piece can move right now."""
        return [i for i in range(BOARD_SIZE) if self.can_move(i)]

    # -- Actions -------------------------------------------------------------

    def roll_dice(self) -> int:
        """
        Throw the sticks and store the result as the pending move.

        A pending throw is overwritten if one was already waiting. Once the
        game is over the sticks are not thrown at all: the random source is
        not consulted, dice_value stays 0 and 0 is returned, so a finished
        game never has a move pending.

        Returns:
            The new dice value
        """
        if self.game_over:
            return 0
        self.dice_value = self._sticks.throw()
        logger.debug("%s threw %d", self.current_player.value, self.dice_value)
        return self.dice_value

    def set_dice_value(self, value: int) -> None:
        """Force the pending throw (deterministic play and tests)."""
        self.dice_value = validate_dice_value(value)

    def make_move(self, origin: int) -> bool:
        """
        Move the current player's piece on `origin` by the pending throw.

        Steps:
        1. Lift the piece off its square
        2. Past the last square: the piece leaves the board
        3. Onto the House of Water: the piece goes back to its restart range
        4. Otherwise: any opponent on the target goes back to its own restart
           range and the piece takes the target

        Returns:
            True if the move was made, False (with nothing changed) if illegal
        """
        if not self.can_move(origin):
            return False

        mover = self.current_player
        target = origin + self.dice_value
        self.board[origin].occupant = None
        self.dice_value = 0

        if target >= BOARD_SIZE:
            self._tally.scored[mover] += 1
            self.last_result = MoveResult(mover, origin, target, MoveOutcome.EXITED)
            logger.debug("%s bore off from %d", mover.value, origin)
            self._finish_turn()
            return True

        if target == HOUSE_OF_WATER:
            landed = self._send_back(mover)
            self.last_result = MoveResult(
                mover,
                origin,
                target,
                MoveOutcome.RESTARTED,
                relocated=mover,
                relocated_to=landed,
                piece_lost=landed is None,
            )
            logger.debug("%s fell into the House of Water, restarts at %s", mover.value, landed)
            # Nothing left the board, so there is no win to check
            self._switch_player()
            return True

        victim = self.board[target].occupant
        if victim is not None:
            # can_move guarantees the occupant is the opponent
            landed = self._send_back(victim)
            self.board[target].occupant = mover
            self.last_result = MoveResult(
                mover,
                origin,
                target,
                MoveOutcome.CAPTURED,
                relocated=victim,
                relocated_to=landed,
                piece_lost=landed is None,
            )
            logger.debug("%s captured on %d, %s restarts at %s", mover.value, target, victim.value, landed)
        else:
            self.board[target].occupant = mover
            self.last_result = MoveResult(mover, origin, target, MoveOutcome.MOVED)

        self._finish_turn()
        return True

    def pass_turn(self) -> None:
        """Give up a pending throw that has no legal move."""
        if self.dice_value != 0:
            self.dice_value = 0
            self._switch_player()

    def reset(self) -> None:
        """Start a new game with the same random source."""
        self._setup()

    # -- Snapshots -----------------------------------------------------------

    def to_snapshot(self) -> GameSnapshot:
        """Capture the full state as an immutable model."""
        return GameSnapshot(
            board=self.get_board(),
            current_player=self.current_player,
            dice_value=self.dice_value,
            game_over=self.game_over,
            winner=self.winner,
            scored=dict(self._tally.scored),
            lost=dict(self._tally.lost),
        )

    @classmethod
    def from_snapshot(
        cls,
        snapshot: GameSnapshot,
        rng: RandomSource | None = None,
    ) -> "SenetEngine":
        """
        Rebuild an engine from a snapshot.

        Raises:
            ValueError: If the snapshot describes an impossible position
        """
        codes = validate_board_codes(snapshot.board)
        validate_piece_counts(codes, snapshot.scored, snapshot.lost)
        validate_outcome(
            codes, snapshot.lost, snapshot.game_over, snapshot.winner, snapshot.dice_value
        )

        engine = cls(rng)
        for square, code in zip(engine.board, codes):
            square.occupant = player_for_code(code)
        engine.current_player = snapshot.current_player
        engine.dice_value = snapshot.dice_value
        engine.game_over = snapshot.game_over
        engine.winner = snapshot.winner
        for player in Player:
            engine._tally.scored[player] = snapshot.scored.get(player, 0)
            engine._tally.lost[player] = snapshot.lost.get(player, 0)
        return engine

    # -- Internals -----------------------------------------------------------

    @staticmethod
    def _on_board(index: int) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < BOARD_SIZE

    def _square(self, index: int) -> Square:
        if not self._on_board(index):
            raise IndexError(f"Square index must be 0-{BOARD_SIZE - 1}, got {index}")
        return self.board[index]

    def _send_back(self, player: Player) -> int | None:
        """
        Put one of `player`'s pieces on the first empty square of its restart range.

        Returns:
            Square used, or None if the range was full and the piece is lost
        """
        for i in player.restart_range:
            if self.board[i].occupant is None:
                self.board[i].occupant = player
                return i

        self._tally.lost[player] += 1
        logger.warning("Restart range full for %s, piece removed from play", player.value)
        return None

    def _finish_turn(self) -> None:
        self._check_win_condition()
        if not self.game_over:
            self._switch_player()

    def _switch_player(self) -> None:
        self.current_player = self.current_player.opponent

    def _check_win_condition(self) -> None:
        if self.pieces_on_board(Player.LIGHT) == 0:
            self.game_over = True
            self.winner = Player.LIGHT
        elif self.pieces_on_board(Player.DARK) == 0:
            self.game_over = True
            self.winner = Player.DARK

        if self.game_over:
            logger.info("Game over, %s wins", self.winner.value)
