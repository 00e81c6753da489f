"""
Game state management for the TicTacToe board engine.
Tracks the board, whose turn it is, and who won.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from .errors import IllegalReentryError, NoStrategyError
from .move_validator import MoveValidator, check_coordinates
from .pieces import BOARD_SIZE, Piece, Winner
from .win_checker import Line, WinChecker

if TYPE_CHECKING:
    from .ai_player import ComputerPlayer

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class ExecutionState(Enum):
    """What the game is doing right now."""
    IDLE = "idle"
    EVALUATING_STRATEGY = "evaluating_strategy"


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    piece: Piece            # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (0-8)


class TicTacToeGame:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board
    - Current player (X always starts, None once the game is over)
    - Move history
    - Game result

    A finished game cannot be reset. To play again, create a new game.

    Moves are played either directly with apply_move() or by the bound
    computer player with apply_automated_move(). The game doesn't know
    which side is human; the host decides which call to make.
    """

    def __init__(self):
        self._board: List[List[Piece]] = [
            [Piece.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        self._started = False
        self._finished = False
        self._current_player: Optional[Piece] = Piece.X
        self._winner: Optional[Winner] = None
        self._winning_line: Optional[Line] = None
        self._moves: List[Move] = []

        self._strategy: Optional["ComputerPlayer"] = None
        self._execution_state = ExecutionState.IDLE

        self._win_checker = WinChecker()
        self._validator = MoveValidator()
        self._view = GameView(self)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, row: int, col: int) -> Piece:
        """Get the piece at (row, col)."""
        check_coordinates(row, col)
        return self._board[row][col]

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def current_player(self) -> Optional[Piece]:
        """Whose turn it is, or None once the game has ended."""
        return self._current_player

    @property
    def winner(self) -> Optional[Winner]:
        """None while the game is in progress."""
        return self._winner

    @property
    def status(self) -> GameStatus:
        if self._finished:
            return GameStatus.FINISHED
        if self._started:
            return GameStatus.IN_PROGRESS
        return GameStatus.NOT_STARTED

    @property
    def execution_state(self) -> ExecutionState:
        return self._execution_state

    @property
    def strategy(self) -> Optional["ComputerPlayer"]:
        return self._strategy

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def view(self) -> "GameView":
        """Read-only view of this game, as handed to computer players."""
        return self._view

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        return [
            (row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self._board[row][col] == Piece.EMPTY
        ]

    def is_board_full(self) -> bool:
        return self._win_checker.is_board_full(self._board)

    def winning_line(self) -> Optional[Line]:
        """The three cells of the winning line, or None."""
        return self._winning_line

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def bind_strategy(self, strategy: Optional["ComputerPlayer"]):
        """Set the computer player used by apply_automated_move()."""
        self._strategy = strategy

    def apply_move(self, row: int, col: int) -> bool:
        """
        Play the current player's piece at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if the move was played, False if the game is over or the
            cell is occupied. A rejected move leaves the game unchanged.

        Raises:
            IllegalReentryError: called while a computer player is deciding.
            InvalidCoordinatesError: (row, col) is off the board.
        """
        self._check_not_evaluating("apply_move()")

        result = self._validator.validate_move(self._view, row, col)
        if not result.is_valid:
            logger.warning("Cannot play at (%d, %d): %s", row, col, result.error_message)
            return False

        piece = self._current_player
        logger.info("Playing %s at (%d, %d)", piece.value, row, col)

        self._board[row][col] = piece
        self._moves.append(Move(piece=piece, row=row, col=col, move_number=len(self._moves)))
        self._started = True

        outcome = self._win_checker.evaluate_last_move(self._board, row, col)
        if outcome is None:
            self._current_player = piece.opposite()
            logger.debug("Current player now %s", self._current_player.value)
        else:
            self._finish(outcome, row, col)

        return True

    def apply_automated_move(self) -> bool:
        """
        Let the bound computer player make the current player's move.

        Returns:
            True once the move is played, False if the game is already over.

        Raises:
            NoStrategyError: no computer player is bound.
            InvalidStrategyMoveError: the computer player returned a bad move.
            IllegalReentryError: the computer player tried to play by itself.
        """
        self._check_not_evaluating("apply_automated_move()")

        if self._finished:
            logger.warning("Cannot let the computer play: game has ended")
            return False

        if self._strategy is None:
            logger.error("Computer player has not been set")
            raise NoStrategyError("Computer player has not been set")

        logger.debug("Calling computer player %s...", self._strategy.name)
        self._execution_state = ExecutionState.EVALUATING_STRATEGY
        try:
            candidate = self._strategy.decide(self._view)
        finally:
            self._execution_state = ExecutionState.IDLE
        logger.debug("Computer player returned: %r", candidate)

        row, col = self._validator.check_strategy_move(self._view, candidate)
        return self.apply_move(row, col)

    def _check_not_evaluating(self, method: str):
        if self._execution_state == ExecutionState.EVALUATING_STRATEGY:
            msg = (f"Computer player has illegally called {method}, or this method "
                   "was called from another thread while the computer player is processing")
            logger.error(msg)
            raise IllegalReentryError(msg)

    def _finish(self, outcome: Winner, row: int, col: int):
        self._finished = True
        self._current_player = None
        self._winner = outcome
        if outcome != Winner.DRAW:
            self._winning_line = self._win_checker.find_completed_line(self._board, row, col)
        logger.info("Game over. Winner: %s", outcome.name)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def format_board(self) -> str:
        """Render the board as text."""
        lines = ["  0   1   2", "+---+---+---+"]
        for row in range(BOARD_SIZE):
            cells = " | ".join(self._board[row][col].value for col in range(BOARD_SIZE))
            lines.append(f"| {cells} | {row}")
            lines.append("+---+---+---+")

        if self._finished:
            if self._winner == Winner.DRAW:
                lines.append("It's a DRAW!")
            else:
                lines.append(f"{self._winner.value} WINS!")
        else:
            lines.append(f"Current turn: {self._current_player.value}")
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.format_board())


class GameView:
    """
    Read-only window onto a TicTacToeGame.

    Computer players get one of these so they can look at the board but
    have nothing to call that would change it.
    """

    __slots__ = ("_game",)

    def __init__(self, game: TicTacToeGame):
        self._game = game

    def get(self, row: int, col: int) -> Piece:
        return self._game.get(row, col)

    @property
    def is_started(self) -> bool:
        return self._game.is_started

    @property
    def is_finished(self) -> bool:
        return self._game.is_finished

    @property
    def current_player(self) -> Optional[Piece]:
        return self._game.current_player

    @property
    def winner(self) -> Optional[Winner]:
        return self._game.winner

    @property
    def moves(self) -> Tuple[Move, ...]:
        return self._game.moves

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        return self._game.get_empty_cells()
