"""
Senet - Game Engine Base Classes

This module defines the board constants, enums and small data structures used
throughout the engine. Squares are the only mutable records: their occupant
changes as pieces move, their square type never does.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto


BOARD_SIZE = 30
PIECES_PER_PLAYER = 5
HOUSE_OF_WATER = 26


class Player(Enum):
    """A side in the game."""
    LIGHT = "light"
    DARK = "dark"

    @property
    def opponent(self) -> "Player":
        """The other side."""
        return Player.DARK if self is Player.LIGHT else Player.LIGHT

    @property
    def restart_range(self) -> range:
        """Squares scanned, lowest first, when one of this side's pieces is sent back."""
        return RESTART_RANGES[self]

    @property
    def start_squares(self) -> range:
        """Squares this side occupies when a game begins."""
        return START_SQUARES[self]


class SquareType(Enum):
    """Fixed tag on a board position, independent of occupancy."""
    EMPTY = auto()
    SAFE_HOUSE = auto()
    HOUSE_OF_HAPPINESS = auto()
    HOUSE_OF_WATER = auto()
    HOUSE_OF_THREE_TRUTHS = auto()
    HOUSE_OF_RE_ATUM = auto()


class BoardCode(IntEnum):
    """
    Per-square integer code used by the flattened board view.

    An occupant always wins over the square's tag, so an occupied special
    square reports only LIGHT or DARK.
    """
    EMPTY = 0
    LIGHT = 1
    DARK = 2
    SAFE_HOUSE = 3
    HOUSE_OF_HAPPINESS = 4
    HOUSE_OF_WATER = 5
    HOUSE_OF_THREE_TRUTHS = 6
    HOUSE_OF_RE_ATUM = 7


class MoveOutcome(Enum):
    """What happened to the moving piece."""
    MOVED = auto()      # Landed on an empty square
    CAPTURED = auto()   # Landed on an opponent and sent it back
    EXITED = auto()     # Left the board
    RESTARTED = auto()  # Fell into the House of Water


RESTART_RANGES: dict[Player, range] = {
    Player.LIGHT: range(0, 10),
    Player.DARK: range(5, 15),
}

START_SQUARES: dict[Player, range] = {
    Player.LIGHT: range(0, 5),
    Player.DARK: range(5, 10),
}

SPECIAL_SQUARES: dict[int, SquareType] = {
    14: SquareType.SAFE_HOUSE,
    25: SquareType.HOUSE_OF_HAPPINESS,
    HOUSE_OF_WATER: SquareType.HOUSE_OF_WATER,
    27: SquareType.HOUSE_OF_THREE_TRUTHS,
    28: SquareType.HOUSE_OF_RE_ATUM,
}

_PLAYER_CODES: dict[Player, BoardCode] = {
    Player.LIGHT: BoardCode.LIGHT,
    Player.DARK: BoardCode.DARK,
}

_EMPTY_CODES: dict[SquareType, BoardCode] = {
    SquareType.EMPTY: BoardCode.EMPTY,
    SquareType.SAFE_HOUSE: BoardCode.SAFE_HOUSE,
    SquareType.HOUSE_OF_HAPPINESS: BoardCode.HOUSE_OF_HAPPINESS,
    SquareType.HOUSE_OF_WATER: BoardCode.HOUSE_OF_WATER,
    SquareType.HOUSE_OF_THREE_TRUTHS: BoardCode.HOUSE_OF_THREE_TRUTHS,
    SquareType.HOUSE_OF_RE_ATUM: BoardCode.HOUSE_OF_RE_ATUM,
}

_CODE_PLAYERS: dict[BoardCode, Player] = {code: p for p, code in _PLAYER_CODES.items()}


@dataclass
class Square:
    """
    One position on the track.

    Attributes:
        _square_type: Fixed tag for the position, read through `square_type`
        occupant: Side whose piece stands here, if any
    """
    _square_type: SquareType = SquareType.EMPTY
    occupant: Player | None = None

    @property
    def square_type(self) -> SquareType:
        return self._square_type

    @property
    def is_empty(self) -> bool:
        return self.occupant is None

    def encode(self) -> BoardCode:
        """Integer code for the flattened board view."""
        if self.occupant is not None:
            return _PLAYER_CODES[self.occupant]
        return _EMPTY_CODES[self.square_type]


def square_type_at(index: int) -> SquareType:
    """Fixed tag for a board index."""
    return SPECIAL_SQUARES.get(index, SquareType.EMPTY)


def empty_code_at(index: int) -> BoardCode:
    """Code an index reports when nothing stands on it."""
    return _EMPTY_CODES[square_type_at(index)]


def player_for_code(code: int) -> Player | None:
    """Occupant implied by a board code (None for every empty code)."""
    return _CODE_PLAYERS.get(BoardCode(code))


def build_board() -> list[Square]:
    """
    Build the opening board.

    Returns:
        30 squares with special tags in place, LIGHT on 0-4 and DARK on 5-9
    """
    board = [Square(square_type_at(i)) for i in range(BOARD_SIZE)]
    for player, squares in START_SQUARES.items():
        for i in squares:
            board[i].occupant = player
    return board


@dataclass(frozen=True)
class MoveResult:
    """
    Structured description of a completed move.

    Attributes:
        player: Side that moved
        origin: Square the piece left
        target: Computed destination (from + dice); may be 30 or more on exit
        outcome: What happened to the moving piece
        relocated: Side whose piece was sent back to its restart range, if any
        relocated_to: Square the sent-back piece landed on (None if it was lost)
        piece_lost: True when the restart range was full and the piece vanished
    """
    player: Player
    origin: int
    target: int
    outcome: MoveOutcome
    relocated: Player | None = None
    relocated_to: int | None = None
    piece_lost: bool = False

    @property
    def landed_on(self) -> int | None:
        """Square the moving piece now stands on, None if it left the board."""
        if self.outcome is MoveOutcome.EXITED:
            return None
        if self.outcome is MoveOutcome.RESTARTED:
            return self.relocated_to
        return self.target


@dataclass
class PieceTally:
    """Per-side counters for pieces no longer on the track."""
    scored: dict[Player, int] = field(
        default_factory=lambda: {Player.LIGHT: 0, Player.DARK: 0}
    )
    lost: dict[Player, int] = field(
        default_factory=lambda: {Player.LIGHT: 0, Player.DARK: 0}
    )
