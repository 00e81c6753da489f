"""
Running score across games.
"""

import logging
from dataclasses import dataclass

from logic.pieces import Piece, Winner

logger = logging.getLogger(__name__)


@dataclass
class Scoreboard:
    player_one: int = 0
    player_two: int = 0
    draws: int = 0

    def record(self, winner: Winner, player_one_piece: Piece):
        """
        Count a finished game.

        Args:
            winner: Result of the game.
            player_one_piece: Piece player one was playing.
        """
        if winner == Winner.DRAW:
            self.draws += 1
        elif winner.piece == player_one_piece:
            self.player_one += 1
        else:
            self.player_two += 1
        logger.info("Score now P1=%d P2=%d draws=%d", self.player_one, self.player_two, self.draws)

    def reset(self):
        self.player_one = self.player_two = self.draws = 0

    def format(self) -> str:
        return f"Player 1: {self.player_one}  Player 2: {self.player_two}  Draws: {self.draws}"
