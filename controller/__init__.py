"""
Controller module for the SensorTag TicTacToe game.
Hosts a game session: sensor input, computer turns and score.
"""

from .config import ControllerConfig
from .scheduler import DeferredScheduler, ImmediateScheduler
from .scoreboard import Scoreboard
from .samples import SensorSample, load_trace
from .game_controller import GameController
