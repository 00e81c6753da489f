"""
Move validator for the TicTacToe board engine.
Separates ordinary rejected moves from caller bugs.
"""

import logging
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from .errors import InvalidCoordinatesError, InvalidStrategyMoveError
from .pieces import BOARD_SIZE, Piece

if TYPE_CHECKING:
    from .game_state import GameView

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def check_coordinates(row: int, col: int) -> None:
    """Raise InvalidCoordinatesError unless (row, col) is on the board."""
    if not in_bounds(row, col):
        raise InvalidCoordinatesError(
            f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}."
        )


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Can only place on empty cells
    """

    def validate_move(self, game: "GameView", row: int, col: int) -> ValidationResult:
        """
        Validate a move without playing it.

        Args:
            game: Current game.
            row: Row to place piece (0-2).
            col: Column to place piece (0-2).

        Returns:
            ValidationResult with is_valid and error_message.

        Raises:
            InvalidCoordinatesError: if (row, col) is off the board.
        """
        check_coordinates(row, col)

        if game.is_finished:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        occupant = game.get(row, col)
        if occupant != Piece.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def check_strategy_move(
        self,
        game: "GameView",
        candidate: Sequence[int]
    ) -> Tuple[int, int]:
        """
        Check a move returned by a computer player.

        Args:
            game: Game the move is meant for.
            candidate: The (row, col) the strategy returned.

        Returns:
            The candidate as a (row, col) tuple.

        Raises:
            InvalidStrategyMoveError: malformed, off-board or occupied move.
        """
        try:
            row, col = candidate
        except (TypeError, ValueError):
            raise InvalidStrategyMoveError(
                f"Computer player returned invalid value: {candidate!r}"
            ) from None

        if (not isinstance(row, numbers.Integral) or not isinstance(col, numbers.Integral)
                or not in_bounds(row, col)):
            logger.error("Computer player returned invalid value: %r", candidate)
            raise InvalidStrategyMoveError(
                f"Computer player returned invalid value: {candidate!r}"
            )

        if game.get(row, col) != Piece.EMPTY:
            logger.error("Computer player returned an occupied cell: %r", candidate)
            raise InvalidStrategyMoveError(
                f"Computer player returned play on an occupied cell: {candidate!r}"
            )

        return int(row), int(col)
