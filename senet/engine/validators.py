"""
Senet - Input Validation Utilities

Validation for values that enter the engine through its seams (test hooks
and restored snapshots). All validators either return validated data or
raise descriptive ValueError exceptions. Ordinary play never goes through
here: illegal moves are reported by return value, not by exception.
"""

from typing import Mapping, Sequence

from senet.engine.base import (
    BOARD_SIZE,
    PIECES_PER_PLAYER,
    BoardCode,
    Player,
    empty_code_at,
)
from senet.engine.dice import StickThrow


def validate_dice_value(value: int) -> int:
    """
    Validate a pending dice value.

    Args:
        value: 0 (no roll pending) or a throw of 1-4

    Returns:
        Validated value

    Raises:
        ValueError: If value is not an integer in 0-4
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Dice value must be an integer, got {type(value).__name__}.")

    if not (0 <= value <= StickThrow.FACES):
        raise ValueError(f"Dice value must be between 0 and {StickThrow.FACES}, got {value}.")

    return value


def validate_board_codes(codes: Sequence[int]) -> tuple[BoardCode, ...]:
    """
    Validate a flattened board against the fixed square layout.

    An empty square must report the code of its own square type, so a
    HOUSE_OF_WATER code anywhere but square 26 is rejected.

    Args:
        codes: 30 board codes

    Returns:
        Codes as a tuple of BoardCode

    Raises:
        ValueError: If length, code range, or special-square placement is wrong
    """
    if len(codes) != BOARD_SIZE:
        raise ValueError(f"Board must have exactly {BOARD_SIZE} squares, got {len(codes)}.")

    validated = []
    for i, code in enumerate(codes):
        try:
            board_code = BoardCode(code)
        except ValueError:
            raise ValueError(f"Square {i} has unknown board code {code}.") from None

        if board_code not in (BoardCode.LIGHT, BoardCode.DARK):
            expected = empty_code_at(i)
            if board_code != expected:
                raise ValueError(
                    f"Square {i} is empty and must report code {int(expected)}, got {code}."
                )
        validated.append(board_code)

    return tuple(validated)


def _on_board(codes: Sequence[int], player: Player) -> int:
    code = BoardCode.LIGHT if player is Player.LIGHT else BoardCode.DARK
    return sum(1 for c in codes if c == code)


def validate_piece_counts(
    codes: Sequence[int],
    scored: Mapping[Player, int],
    lost: Mapping[Player, int],
) -> None:
    """
    Check that every side accounts for exactly its five pieces.

    Args:
        codes: Validated board codes
        scored: Pieces each side has moved off the board
        lost: Pieces each side lost to a full restart range

    Raises:
        ValueError: If a count is negative or a side's total is not five
    """
    for player in Player:
        if scored.get(player, 0) < 0 or lost.get(player, 0) < 0:
            raise ValueError(f"Off-board counts for {player.value} cannot be negative.")
        on_board = _on_board(codes, player)
        off_board = scored.get(player, 0) + lost.get(player, 0)
        if on_board + off_board != PIECES_PER_PLAYER:
            raise ValueError(
                f"{player.value} has {on_board} pieces on board and {off_board} off board "
                f"(expected {PIECES_PER_PLAYER} in total)."
            )


def validate_outcome(
    codes: Sequence[int],
    lost: Mapping[Player, int],
    game_over: bool,
    winner: Player | None,
    dice_value: int,
) -> None:
    """
    Check the game-over fields agree with each other and with the board.

    A side with no pieces left has won, unless its last piece was lost in
    the House of Water, which never ends the game.

    Args:
        codes: Validated board codes
        lost: Pieces each side lost to a full restart range
        game_over: Whether the game has finished
        winner: Winning side, if any
        dice_value: Pending throw

    Raises:
        ValueError: If winner is set without game_over (or the reverse), a
            finished game still has a roll pending, the winner still has
            pieces on the board, or an unfinished game should have ended
    """
    if game_over and winner is None:
        raise ValueError("A finished game must have a winner.")
    if not game_over and winner is not None:
        raise ValueError("A winner can only be set once the game is over.")
    if game_over and dice_value != 0:
        raise ValueError("A finished game cannot have a roll pending.")

    if game_over:
        remaining = _on_board(codes, winner)
        if remaining != 0:
            raise ValueError(
                f"{winner.value} cannot have won with {remaining} pieces on board."
            )
        return

    for player in Player:
        if _on_board(codes, player) == 0 and lost.get(player, 0) == 0:
            raise ValueError(
                f"{player.value} has no pieces on board, so the game should be over."
            )
