"""
Shake detector for the SensorTag TicTacToe controller.
Turns a stream of accelerometer samples into discrete shake events.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .config import MotionConfig
from .high_pass import HighPassFilter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShakeEvent:
    """A detected shake."""
    magnitude: float          # Norm of the filtered acceleration (g)
    filtered: Tuple[float, float, float]  # Filtered (x, y, z) that triggered it


class ShakeDetector:
    """
    Detects shakes with a high-pass filter and a cooldown.

    A shake is a filtered sample whose magnitude exceeds the threshold.
    After a shake the detector cools down: samples are still filtered,
    but their magnitude isn't checked until EVENT_COOLDOWN_MS of sample
    time has passed. At most one shake per cooldown window.
    """

    def __init__(self, config: Optional[MotionConfig] = None):
        """
        Initialize the shake detector.

        Args:
            config: Motion configuration. Uses defaults if not provided.
        """
        self.config = config or MotionConfig()
        self.filter = HighPassFilter(self.config.FILTER_TAU_MS)

        # Starts saturated so the very first sample may fire
        self.cooldown_elapsed_ms = self.config.EVENT_COOLDOWN_MS

    @property
    def in_cooldown(self) -> bool:
        return self.cooldown_elapsed_ms < self.config.EVENT_COOLDOWN_MS

    def on_sample(self, period_ms: float, x: float, y: float, z: float) -> Optional[ShakeEvent]:
        """
        Feed one accelerometer sample.

        Args:
            period_ms: Current sensor period in milliseconds.
            x, y, z: Acceleration in g.

        Returns:
            A ShakeEvent if this sample is a shake, otherwise None.
        """
        filtered = self.filter.apply(period_ms, (x, y, z))

        if self.in_cooldown:
            self.cooldown_elapsed_ms += period_ms
            logger.debug("Cooldown counter: %sms", self.cooldown_elapsed_ms)
            return None

        magnitude = float(np.linalg.norm(filtered))
        if magnitude > self.config.SHAKE_THRESHOLD_G:
            logger.info("Accelerometer shake detected (%.2fg)", magnitude)
            self.cooldown_elapsed_ms = 0
            return ShakeEvent(magnitude=magnitude, filtered=tuple(float(v) for v in filtered))

        return None

    def reset(self):
        """Back to the start state: no history, not cooling down."""
        self.filter.reset()
        self.cooldown_elapsed_ms = self.config.EVENT_COOLDOWN_MS
