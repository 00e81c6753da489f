"""
Controller configuration for the SensorTag TicTacToe game.
Game flow settings for the host that owns the game and the sensor.
"""

from motion.config import MotionConfig


class ControllerConfig:
    """
    Configuration for the game controller.
    Command-line flags in main.py override these.
    """

    # ==================== COMPUTER PLAYER ====================
    # "Thinking time" before a computer move, in milliseconds.
    # Computer moves are instant otherwise, which is hard to follow.
    COMPUTER_DELAY_MS = 1500

    # ==================== SENSOR ====================
    # Accelerometer period requested from the sensor (milliseconds)
    ACCELEROMETER_PERIOD_MS = MotionConfig.DEFAULT_SAMPLE_PERIOD_MS

    # ==================== GAME SETUP ====================
    # Cursor starts in the centre of the board
    START_CURSOR = (1, 1)

    # Player modes, by name (see logic.ai_player.PLAYER_MODES)
    DEFAULT_PLAYER_ONE = "human"
    DEFAULT_PLAYER_TWO = "random"

    # Piece played by player one ("X" or "O"). X always moves first.
    PLAYER_ONE_PIECE = "X"
