"""
Motion module for the SensorTag TicTacToe controller.
Handles accelerometer filtering, shake detection and button presses.
"""

from .config import MotionConfig
from .high_pass import HighPassFilter, high_pass_coefficient
from .shake_detector import ShakeDetector, ShakeEvent
from .buttons import Button, ButtonEdgeDetector, ButtonPressed
from .detector import MotionEventDetector
