"""
Logic module for the SensorTag TicTacToe game.
Handles game state, rules, and computer players.
"""

from .pieces import BOARD_SIZE, Piece, Winner
from .errors import (
    GameError,
    GameFinishedError,
    IllegalReentryError,
    InvalidCoordinatesError,
    InvalidStrategyMoveError,
    NoStrategyError,
)
from .game_state import ExecutionState, GameStatus, GameView, Move, TicTacToeGame
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import (
    PLAYER_MODES,
    ComputerPlayer,
    Human,
    PlayerMode,
    RandomComputer,
    create_player_mode,
    is_computer,
)
