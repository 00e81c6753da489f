"""
Board pieces and game results.
"""

from enum import Enum
from typing import Optional


# Win detection only knows about 3x3 boards, don't change this.
BOARD_SIZE = 3


class Piece(Enum):
    """What a board cell holds. X always plays first."""
    X = "X"
    O = "O"
    EMPTY = " "

    def opposite(self) -> "Piece":
        """Get the other player's piece."""
        if self == Piece.X:
            return Piece.O
        if self == Piece.O:
            return Piece.X
        raise ValueError("EMPTY has no opposite")

    @classmethod
    def parse(cls, text: str) -> "Piece":
        """Parse "x" / "O" style text into a player piece."""
        value = text.strip().upper()
        if value not in ("X", "O"):
            raise ValueError(f"Expected X or O, got {text!r}")
        return cls(value)


class Winner(Enum):
    """Result of a finished game."""
    X = "X"
    O = "O"
    DRAW = "draw"

    @classmethod
    def from_piece(cls, piece: Piece) -> "Winner":
        if piece == Piece.EMPTY:
            raise ValueError("An empty cell cannot win")
        return cls(piece.value)

    @property
    def piece(self) -> Optional[Piece]:
        """The winning piece, or None for a draw."""
        if self == Winner.DRAW:
            return None
        return Piece(self.value)
