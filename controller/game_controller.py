"""
Game controller for the SensorTag TicTacToe game.

This ties together:
- Logic (game state, computer players)
- Motion (shake and button events from the sensor)
- Scheduling (computer "thinking time")
- Score keeping

Controls:
1. LEFT button moves the cursor down one row (wrapping around)
2. RIGHT button moves the cursor right one column (wrapping around)
3. Shaking plays the current player's piece at the cursor
4. Shaking a finished game starts a new one with the same settings
"""

import logging
import threading
from typing import Callable, List, Optional, Tuple

from logic.ai_player import PlayerMode, create_player_mode, is_computer
from logic.game_state import TicTacToeGame
from logic.pieces import BOARD_SIZE, Piece, Winner
from motion.buttons import Button, ButtonPressed
from motion.config import MotionConfig
from motion.detector import MotionEventDetector
from motion.shake_detector import ShakeEvent

from .config import ControllerConfig
from .scheduler import DeferredScheduler
from .scoreboard import Scoreboard

logger = logging.getLogger(__name__)

Listener = Callable[["GameController"], None]


class GameController:
    """
    Host for one TicTacToe session.

    Owns the current game (a new one per round), the motion detector fed
    by the sensor, the cursor and the score. Sensor updates and timer
    callbacks arrive on different threads, so every public method takes
    the same lock before touching the game.
    """

    def __init__(
        self,
        scheduler=None,
        config: Optional[ControllerConfig] = None,
        motion_config: Optional[MotionConfig] = None
    ):
        """
        Initialize the controller and start a first game.

        Args:
            scheduler: Runs delayed computer moves. Uses a DeferredScheduler
                if not provided.
            config: Controller configuration.
            motion_config: Motion configuration for the shake detector.
        """
        self.config = config or ControllerConfig()
        self.scheduler = scheduler or DeferredScheduler()
        self.computer_delay_ms = self.config.COMPUTER_DELAY_MS

        self._lock = threading.RLock()
        self._listeners: List[Listener] = []

        self.detector = MotionEventDetector(motion_config)
        self.detector.add_listener(on_shake=self._on_shake_event, on_button=self._on_button)

        self.scoreboard = Scoreboard()
        self.cursor: Tuple[int, int] = tuple(self.config.START_CURSOR)

        self.player_one_piece = Piece.parse(self.config.PLAYER_ONE_PIECE)
        self.player_one: PlayerMode = create_player_mode(self.config.DEFAULT_PLAYER_ONE)
        self.player_two: PlayerMode = create_player_mode(self.config.DEFAULT_PLAYER_TWO)

        self.game: TicTacToeGame
        self._score_recorded = False
        self.new_game()

    @property
    def lock(self) -> threading.RLock:
        """Hold this to read several fields consistently."""
        return self._lock

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    @property
    def player_two_piece(self) -> Piece:
        return self.player_one_piece.opposite()

    def mode_for(self, piece: Optional[Piece]) -> Optional[PlayerMode]:
        """Which player mode plays this piece (None once the game is over)."""
        if piece is None:
            return None
        return self.player_one if piece == self.player_one_piece else self.player_two

    def is_computer_turn(self) -> bool:
        with self._lock:
            return is_computer(self.mode_for(self.game.current_player))

    # ------------------------------------------------------------------
    # Game lifecycle
    # ------------------------------------------------------------------

    def new_game(
        self,
        player_one_piece: Optional[Piece] = None,
        player_one: Optional[PlayerMode] = None,
        player_two: Optional[PlayerMode] = None
    ) -> TicTacToeGame:
        """
        Start a new game. Settings not given are kept from the last game.

        Args:
            player_one_piece: Piece player one plays (X moves first).
            player_one: Player one's mode.
            player_two: Player two's mode.

        Returns:
            The new game.
        """
        with self._lock:
            if player_one_piece is not None:
                self.player_one_piece = player_one_piece
            if player_one is not None:
                self.player_one = player_one
            if player_two is not None:
                self.player_two = player_two

            logger.info(
                "New game: P1=%s (%s); P2=%s (%s)",
                self.player_one_piece.value, self.player_one.name,
                self.player_two_piece.value, self.player_two.name,
            )

            # Drop a computer move still "thinking" about the old game
            self.scheduler.cancel_all()

            self.game = TicTacToeGame()
            self._score_recorded = False
            self._notify()

            self.schedule_computer_move()
            return self.game

    def reset_score(self):
        with self._lock:
            logger.info("Resetting score")
            self.scoreboard.reset()
            self._notify()

    def close(self):
        """Cancel anything still scheduled."""
        with self._lock:
            self.scheduler.cancel_all()

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def set_cursor(self, row: int, col: int):
        with self._lock:
            self.cursor = (row % BOARD_SIZE, col % BOARD_SIZE)
            logger.debug("Cursor at %s", self.cursor)
            self._notify()

    def move_cursor_row(self):
        """Move the cursor down one row, wrapping to the top."""
        with self._lock:
            row, col = self.cursor
            self.set_cursor(row + 1, col)

    def move_cursor_col(self):
        """Move the cursor right one column, wrapping to the left."""
        with self._lock:
            row, col = self.cursor
            self.set_cursor(row, col + 1)

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def play_at_cursor(self) -> bool:
        """
        Play the current (human) player's piece at the cursor.

        Returns:
            True if the move was played.
        """
        with self._lock:
            row, col = self.cursor

            if self.game.is_finished:
                logger.warning("Cannot play at %s: game has ended", self.cursor)
                return False

            if self.is_computer_turn():
                logger.warning("Cannot play at %s: current player is a computer", self.cursor)
                return False

            if not self.game.apply_move(row, col):
                return False

            self._notify()
            if not self._check_game_ended():
                self.schedule_computer_move()
            return True

    def schedule_computer_move(self, delay_ms: Optional[float] = None) -> bool:
        """
        Let the computer play after its thinking time, if it is its turn.

        Returns:
            True if a move was scheduled.
        """
        with self._lock:
            if self.game.is_finished:
                logger.debug("No computer move: game has ended")
                return False

            if not self.is_computer_turn():
                logger.debug("No computer move: current player is human")
                return False

            if self.scheduler.has_pending():
                logger.warning("Computer already thinking")
                return False

            delay = self.computer_delay_ms if delay_ms is None else delay_ms
            logger.info("Computer %s is thinking for %sms...",
                        self.game.current_player.value, delay)

            game = self.game
            self.scheduler.schedule(delay, lambda: self._run_computer_move(game))
            return True

    def _run_computer_move(self, game: TicTacToeGame):
        with self._lock:
            if game is not self.game:
                logger.debug("Dropping computer move for a discarded game")
                return

            mode = self.mode_for(game.current_player)
            if not is_computer(mode):
                logger.error("Aborting computer move: current player not a computer")
                return

            logger.info("Computer done thinking, playing...")
            game.bind_strategy(mode)
            game.apply_automated_move()
            self._notify()

            # Computer vs computer: keep going
            if not self._check_game_ended():
                self.schedule_computer_move()

    def _check_game_ended(self) -> bool:
        if not self.game.is_finished:
            return False
        if not self._score_recorded:
            self.scoreboard.record(self.game.winner, self.player_one_piece)
            self._score_recorded = True
            logger.info("Game has ended. Winner: %s", self.game.winner.name)
            self._notify()
        return True

    # ------------------------------------------------------------------
    # Sensor input
    # ------------------------------------------------------------------

    def feed_sample(self, period_ms: float, x: float, y: float, z: float) -> Optional[ShakeEvent]:
        """Pass an accelerometer sample to the motion detector."""
        with self._lock:
            return self.detector.on_sample(period_ms, x, y, z)

    def feed_buttons(self, left: bool, right: bool) -> List[ButtonPressed]:
        """Pass the current button levels to the motion detector."""
        with self._lock:
            return self.detector.on_button_state(left, right)

    def on_shake(self):
        """Play at the cursor, or start over if the game is finished."""
        with self._lock:
            if not self.game.is_finished:
                self.play_at_cursor()
            else:
                self.new_game()

    def _on_shake_event(self, event: ShakeEvent):
        self.on_shake()

    def _on_button(self, event: ButtonPressed):
        if event.button == Button.LEFT:
            self.move_cursor_row()
        elif event.button == Button.RIGHT:
            self.move_cursor_col()

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener):
        """Call listener(controller) after every change."""
        with self._lock:
            self._listeners.append(listener)

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)

    def status_message(self) -> str:
        """One line describing the game for display."""
        with self._lock:
            game = self.game
            if game.is_finished:
                if game.winner == Winner.DRAW:
                    return "It's a draw! Shake for a new game."
                who = "Player 1" if game.winner.piece == self.player_one_piece else "Player 2"
                return f"{game.winner.value} wins ({who})! Shake for a new game."

            mode = self.mode_for(game.current_player)
            who = "Player 1" if game.current_player == self.player_one_piece else "Player 2"
            if is_computer(mode):
                return f"{game.current_player.value} to play ({who}, computer thinking...)"
            return f"{game.current_player.value} to play ({who})"
