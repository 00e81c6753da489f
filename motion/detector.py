"""
Motion event detector: everything the SensorTag reports that the game
cares about, turned into discrete events.
"""

from typing import Callable, List, Optional

from .buttons import ButtonEdgeDetector, ButtonPressed
from .config import MotionConfig
from .shake_detector import ShakeDetector, ShakeEvent

ShakeCallback = Callable[[ShakeEvent], None]
ButtonCallback = Callable[[ButtonPressed], None]


class MotionEventDetector:
    """
    Combines shake detection and button edge detection.

    Events are returned from each call and also passed to any listeners.
    Not thread-safe: feed one instance from one sample stream.
    """

    def __init__(self, config: Optional[MotionConfig] = None):
        self.config = config or MotionConfig()
        self.shakes = ShakeDetector(self.config)
        self.buttons = ButtonEdgeDetector()
        self._shake_listeners: List[ShakeCallback] = []
        self._button_listeners: List[ButtonCallback] = []

    def add_listener(
        self,
        on_shake: Optional[ShakeCallback] = None,
        on_button: Optional[ButtonCallback] = None
    ):
        if on_shake is not None:
            self._shake_listeners.append(on_shake)
        if on_button is not None:
            self._button_listeners.append(on_button)

    def on_sample(self, period_ms: float, x: float, y: float, z: float) -> Optional[ShakeEvent]:
        event = self.shakes.on_sample(period_ms, x, y, z)
        if event is not None:
            for listener in list(self._shake_listeners):
                listener(event)
        return event

    def on_button_state(self, left: bool, right: bool) -> List[ButtonPressed]:
        events = self.buttons.on_button_state(left, right)
        for event in events:
            for listener in list(self._button_listeners):
                listener(event)
        return events

    def reset(self):
        self.shakes.reset()
        self.buttons.reset()
