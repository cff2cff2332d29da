"""
Senet - Base Classes Tests

Tests for board constants, enums, squares, and validation utilities.
"""

import pytest

from senet.engine.base import (
    BOARD_SIZE,
    HOUSE_OF_WATER,
    BoardCode,
    MoveOutcome,
    MoveResult,
    Player,
    Square,
    SquareType,
    build_board,
    empty_code_at,
    player_for_code,
    square_type_at,
)
from senet.engine.validators import (
    validate_board_codes,
    validate_dice_value,
    validate_outcome,
    validate_piece_counts,
)


class TestPlayer:
    """Tests for Player enum."""

    def test_values(self):
        assert Player.LIGHT.value == "light"
        assert Player.DARK.value == "dark"

    def test_opponent(self):
        assert Player.LIGHT.opponent is Player.DARK
        assert Player.DARK.opponent is Player.LIGHT

    def test_restart_ranges(self):
        assert list(Player.LIGHT.restart_range) == list(range(0, 10))
        assert list(Player.DARK.restart_range) == list(range(5, 15))

    def test_start_squares(self):
        assert list(Player.LIGHT.start_squares) == [0, 1, 2, 3, 4]
        assert list(Player.DARK.start_squares) == [5, 6, 7, 8, 9]


class TestSquareLayout:
    """Tests for the fixed special-square layout."""

    @pytest.mark.parametrize(
        "index,expected",
        [
            (14, SquareType.SAFE_HOUSE),
            (25, SquareType.HOUSE_OF_HAPPINESS),
            (26, SquareType.HOUSE_OF_WATER),
            (27, SquareType.HOUSE_OF_THREE_TRUTHS),
            (28, SquareType.HOUSE_OF_RE_ATUM),
        ],
    )
    def test_special_squares(self, index, expected):
        assert square_type_at(index) is expected

    def test_plain_squares(self):
        special = {14, 25, 26, 27, 28}
        for i in range(BOARD_SIZE):
            if i not in special:
                assert square_type_at(i) is SquareType.EMPTY

    def test_house_of_water_constant(self):
        assert HOUSE_OF_WATER == 26
        assert square_type_at(HOUSE_OF_WATER) is SquareType.HOUSE_OF_WATER

    def test_empty_codes(self):
        assert empty_code_at(0) is BoardCode.EMPTY
        assert empty_code_at(14) is BoardCode.SAFE_HOUSE
        assert empty_code_at(26) is BoardCode.HOUSE_OF_WATER
        assert empty_code_at(29) is BoardCode.EMPTY


class TestSquare:
    """Tests for Square dataclass."""

    def test_defaults(self):
        square = Square()
        assert square.square_type is SquareType.EMPTY
        assert square.occupant is None
        assert square.is_empty

    def test_occupant_is_mutable(self):
        square = Square(SquareType.SAFE_HOUSE)
        square.occupant = Player.DARK
        assert square.occupant is Player.DARK
        assert not square.is_empty

    def test_square_type_is_fixed(self):
        square = Square(SquareType.HOUSE_OF_WATER)
        with pytest.raises(AttributeError):
            square.square_type = SquareType.EMPTY
        assert square.square_type is SquareType.HOUSE_OF_WATER

    def test_occupant_takes_precedence_in_encoding(self):
        square = Square(SquareType.HOUSE_OF_HAPPINESS, Player.LIGHT)
        assert square.encode() is BoardCode.LIGHT
        square.occupant = Player.DARK
        assert square.encode() is BoardCode.DARK
        square.occupant = None
        assert square.encode() is BoardCode.HOUSE_OF_HAPPINESS

    def test_player_for_code(self):
        assert player_for_code(1) is Player.LIGHT
        assert player_for_code(2) is Player.DARK
        for code in (0, 3, 4, 5, 6, 7):
            assert player_for_code(code) is None


class TestBuildBoard:
    """Tests for the opening board."""

    def test_length(self):
        assert len(build_board()) == BOARD_SIZE

    def test_starting_pieces(self):
        board = build_board()
        assert all(board[i].occupant is Player.LIGHT for i in range(0, 5))
        assert all(board[i].occupant is Player.DARK for i in range(5, 10))
        assert all(board[i].occupant is None for i in range(10, 30))

    def test_squares_are_distinct_objects(self):
        board = build_board()
        board[10].occupant = Player.LIGHT
        assert board[11].occupant is None


class TestMoveResult:
    """Tests for MoveResult dataclass."""

    def test_landed_on_for_plain_move(self):
        result = MoveResult(Player.LIGHT, 4, 7, MoveOutcome.MOVED)
        assert result.landed_on == 7

    def test_landed_on_for_exit(self):
        result = MoveResult(Player.LIGHT, 28, 31, MoveOutcome.EXITED)
        assert result.landed_on is None

    def test_landed_on_for_restart(self):
        result = MoveResult(
            Player.DARK, 24, 26, MoveOutcome.RESTARTED,
            relocated=Player.DARK, relocated_to=10,
        )
        assert result.landed_on == 10

    def test_is_frozen(self):
        result = MoveResult(Player.LIGHT, 0, 1, MoveOutcome.MOVED)
        with pytest.raises(AttributeError):
            result.target = 2


class TestValidateDiceValue:
    """Tests for validate_dice_value."""

    @pytest.mark.parametrize("value", [0, 1, 2, 3, 4])
    def test_valid(self, value):
        assert validate_dice_value(value) == value

    @pytest.mark.parametrize("value", [-1, 5, 6])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError, match="between 0 and 4"):
            validate_dice_value(value)

    def test_not_integer(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_dice_value(2.0)

    def test_bool_rejected(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_dice_value(True)


class TestValidateBoardCodes:
    """Tests for validate_board_codes."""

    def test_initial_board(self, initial_board):
        codes = validate_board_codes(initial_board)
        assert len(codes) == BOARD_SIZE
        assert codes[0] is BoardCode.LIGHT

    def test_wrong_length(self):
        with pytest.raises(ValueError, match="exactly 30 squares"):
            validate_board_codes([0] * 29)

    def test_unknown_code(self, initial_board):
        initial_board[12] = 8
        with pytest.raises(ValueError, match="unknown board code 8"):
            validate_board_codes(initial_board)

    def test_special_code_on_plain_square(self, initial_board):
        initial_board[12] = 5
        with pytest.raises(ValueError, match="Square 12 is empty"):
            validate_board_codes(initial_board)

    def test_plain_code_on_special_square(self, initial_board):
        initial_board[26] = 0
        with pytest.raises(ValueError, match="must report code 5"):
            validate_board_codes(initial_board)

    def test_pieces_allowed_on_special_squares(self, initial_board):
        initial_board[26] = 2
        initial_board[14] = 1
        validate_board_codes(initial_board)


def _codes(light=(), dark=()) -> list[int]:
    """Board codes with pieces on the given squares and every other square empty."""
    codes = [int(empty_code_at(i)) for i in range(BOARD_SIZE)]
    for i in light:
        codes[i] = int(BoardCode.LIGHT)
    for i in dark:
        codes[i] = int(BoardCode.DARK)
    return codes


class TestValidatePieceCounts:
    """Tests for validate_piece_counts."""

    def test_initial_counts(self, initial_board):
        zero = {Player.LIGHT: 0, Player.DARK: 0}
        validate_piece_counts(initial_board, zero, zero)

    def test_off_board_pieces_count(self):
        codes = _codes(light=[3, 20], dark=[5, 6, 7, 8, 9])
        validate_piece_counts(codes, {Player.LIGHT: 2}, {Player.LIGHT: 1})

    def test_too_many_pieces(self, initial_board):
        zero = {Player.LIGHT: 0, Player.DARK: 0}
        with pytest.raises(ValueError, match="light has 5 pieces on board and 1 off board"):
            validate_piece_counts(initial_board, {Player.LIGHT: 1}, zero)

    def test_too_few_pieces(self, initial_board):
        initial_board[0] = 0
        initial_board[1] = 0
        zero = {Player.LIGHT: 0, Player.DARK: 0}
        with pytest.raises(ValueError, match="light has 3 pieces on board and 0 off board"):
            validate_piece_counts(initial_board, zero, zero)

    def test_negative_counts(self, initial_board):
        with pytest.raises(ValueError, match="cannot be negative"):
            validate_piece_counts(initial_board, {Player.DARK: -1}, {})


class TestValidateOutcome:
    """Tests for validate_outcome."""

    def test_ongoing_game(self, initial_board):
        validate_outcome(initial_board, {}, False, None, 3)

    def test_finished_game(self):
        codes = _codes(light=[0, 12], dark=[])
        validate_outcome(codes, {}, True, Player.DARK, 0)

    def test_winner_with_pieces_on_board(self, initial_board):
        with pytest.raises(ValueError, match="light cannot have won with 5 pieces"):
            validate_outcome(initial_board, {}, True, Player.LIGHT, 0)

    def test_unfinished_game_with_empty_side(self):
        codes = _codes(light=[], dark=[5, 6])
        with pytest.raises(ValueError, match="light has no pieces on board"):
            validate_outcome(codes, {}, False, None, 0)

    def test_empty_side_after_house_of_water_loss(self):
        # A piece lost in the House of Water never ends the game
        codes = _codes(light=[], dark=[5, 6])
        validate_outcome(codes, {Player.LIGHT: 1}, False, None, 0)

    def test_over_without_winner(self, initial_board):
        with pytest.raises(ValueError, match="must have a winner"):
            validate_outcome(initial_board, {}, True, None, 0)

    def test_winner_without_over(self, initial_board):
        with pytest.raises(ValueError, match="once the game is over"):
            validate_outcome(initial_board, {}, False, Player.LIGHT, 0)

    def test_finished_with_pending_roll(self):
        codes = _codes(light=[], dark=[5])
        with pytest.raises(ValueError, match="roll pending"):
            validate_outcome(codes, {}, True, Player.LIGHT, 2)
