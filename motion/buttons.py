"""
Button edge detection for the two SensorTag keys.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

logger = logging.getLogger(__name__)


class Button(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class ButtonPressed:
    button: Button


class ButtonEdgeDetector:
    """
    Reports a press only when a button goes from up to down.

    The sensor reports the level of both buttons on every update, so a
    held button would otherwise repeat. Releases are ignored.
    """

    def __init__(self):
        self._pressed: Dict[Button, bool] = {Button.LEFT: False, Button.RIGHT: False}

    def on_button_state(self, left: bool, right: bool) -> List[ButtonPressed]:
        """
        Feed the current button levels.

        Returns:
            Zero, one or two ButtonPressed events, LEFT before RIGHT.
        """
        events = []
        for button, down in ((Button.LEFT, bool(left)), (Button.RIGHT, bool(right))):
            if down and not self._pressed[button]:
                logger.debug("Button %s down", button.value)
                events.append(ButtonPressed(button))
            self._pressed[button] = down
        return events

    def is_pressed(self, button: Button) -> bool:
        return self._pressed[button]

    def reset(self):
        for button in self._pressed:
            self._pressed[button] = False
