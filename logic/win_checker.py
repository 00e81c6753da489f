"""
Win checker for the TicTacToe board engine.
Decides whether the last move ended the game.
"""

import logging
from typing import List, Optional, Tuple

from .pieces import BOARD_SIZE, Piece, Winner

logger = logging.getLogger(__name__)

Line = List[Tuple[int, int]]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Only the row, the column and the diagonals passing through the last
    move are looked at: an earlier move cannot complete a new line.
    """

    def lines_through(self, row: int, col: int) -> List[Line]:
        """
        Get the lines that pass through a cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The row and column, plus the main diagonal if row == col and
            the anti-diagonal if row + col == 2.
        """
        lines = [
            [(row, i) for i in range(BOARD_SIZE)],
            [(i, col) for i in range(BOARD_SIZE)],
        ]
        if row == col:
            lines.append([(i, i) for i in range(BOARD_SIZE)])
        if row + col == BOARD_SIZE - 1:
            lines.append([(i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)])
        return lines

    def find_completed_line(
        self,
        board: List[List[Piece]],
        row: int,
        col: int
    ) -> Optional[Line]:
        """
        Find a line completed by the piece at (row, col).

        Args:
            board: The game board.
            row: Row of the last move.
            col: Column of the last move.

        Returns:
            The completed line, or None if the last move made no line.
        """
        played = board[row][col]
        if played == Piece.EMPTY:
            return None

        for line in self.lines_through(row, col):
            if all(board[r][c] == played for r, c in line):
                logger.info("Win detected on line %s", line)
                return line
        return None

    def is_board_full(self, board: List[List[Piece]]) -> bool:
        """True if no cell is empty."""
        return all(cell != Piece.EMPTY for board_row in board for cell in board_row)

    def evaluate_last_move(
        self,
        board: List[List[Piece]],
        row: int,
        col: int
    ) -> Optional[Winner]:
        """
        Decide how the game stands after a move at (row, col).

        Returns:
            The played piece's Winner if it made three in a row,
            Winner.DRAW if the board is now full, None if play continues.
        """
        if self.find_completed_line(board, row, col) is not None:
            return Winner.from_piece(board[row][col])
        if self.is_board_full(board):
            logger.info("Game ended as draw: board is full")
            return Winner.DRAW
        return None

