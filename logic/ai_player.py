"""
Player modes for the TicTacToe board engine.

A side is played either by a human (moves come from the controller) or by
a computer player that picks a move from a read-only view of the game.
"""

import logging
import random
from typing import Callable, Dict, Optional, Protocol, Tuple, Union, runtime_checkable

from .errors import GameFinishedError
from .game_state import GameView
from .pieces import BOARD_SIZE, Piece

logger = logging.getLogger(__name__)

CENTER = (1, 1)


@runtime_checkable
class ComputerPlayer(Protocol):
    """Anything that can pick the next move for the current player."""

    name: str
    is_computer: bool

    def decide(self, game: GameView) -> Tuple[int, int]:
        """
        Pick a move. Must not play it: return it and let the game play it.

        Args:
            game: Read-only view of the current game.

        Returns:
            (row, col) of an empty cell.
        """
        ...


class Human:
    """A side whose moves come from the person holding the controller."""

    name = "human"
    is_computer = False

    def __repr__(self) -> str:
        return "Human()"


class RandomComputer:
    """
    Takes the centre if it is free, otherwise a random empty cell.

    The cell is found by drawing row and column at random until an empty
    one turns up, so never call this on a full board.
    """

    name = "random"
    is_computer = True

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def decide(self, game: GameView) -> Tuple[int, int]:
        if game.get(*CENTER) == Piece.EMPTY:
            return CENTER

        if game.is_finished:
            raise GameFinishedError("Game has ended")

        while True:
            row = self.rng.randrange(BOARD_SIZE)
            col = self.rng.randrange(BOARD_SIZE)
            if game.get(row, col) == Piece.EMPTY:
                logger.debug("Random computer picked (%d, %d)", row, col)
                return row, col

    def __repr__(self) -> str:
        return "RandomComputer()"


PlayerMode = Union[Human, RandomComputer]

# Names shown to the user -> factory. "human" is always first.
PLAYER_MODES: Dict[str, Callable[[], PlayerMode]] = {
    Human.name: Human,
    RandomComputer.name: RandomComputer,
}


def create_player_mode(name: str) -> PlayerMode:
    """
    Build a player mode by name.

    Args:
        name: One of PLAYER_MODES ("human", "random").

    Raises:
        ValueError: if the name is unknown.
    """
    try:
        factory = PLAYER_MODES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown player mode {name!r}. Choose from: {', '.join(PLAYER_MODES)}"
        ) from None
    return factory()


def is_computer(mode: Optional[PlayerMode]) -> bool:
    return mode is not None and mode.is_computer
