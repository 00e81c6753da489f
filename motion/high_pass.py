"""
First-order high-pass filter for 3-axis accelerometer samples.

    k    = tau / (tau + T)
    y[n] = k * (y[n-1] + x[n] - x[n-1])

Removes the constant gravity component and keeps quick changes.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .config import MotionConfig

logger = logging.getLogger(__name__)


def high_pass_coefficient(tau_ms: float, period_ms: float) -> float:
    """
    Filter coefficient k for a time constant and sample period.

    Args:
        tau_ms: Filter time constant in milliseconds.
        period_ms: Sample period in milliseconds.

    Returns:
        k in (0, 1).
    """
    if period_ms <= 0:
        raise ValueError(f"Sample period must be positive, got {period_ms}")
    return tau_ms / (tau_ms + period_ms)


class HighPassFilter:
    """
    High-pass filter applied to each axis independently.

    The first sample primes the filter: the signal is assumed to have
    been constant forever, so the first output is (0, 0, 0).
    """

    def __init__(self, tau_ms: Optional[float] = None):
        """
        Initialize the filter.

        Args:
            tau_ms: Time constant. Uses MotionConfig.FILTER_TAU_MS if not provided.
        """
        self.tau_ms = MotionConfig.FILTER_TAU_MS if tau_ms is None else tau_ms
        self.last_input: Optional[np.ndarray] = None
        self.last_output: Optional[np.ndarray] = None

    def apply(self, period_ms: float, sample: Sequence[float]) -> np.ndarray:
        """
        Filter one sample.

        Args:
            period_ms: Time since the previous sample, in milliseconds.
            sample: Raw (x, y, z) acceleration.

        Returns:
            Filtered (x, y, z) as a numpy array.
        """
        x_n = np.asarray(sample, dtype=float)
        if x_n.shape != (3,):
            raise ValueError(f"Expected a 3-axis sample, got shape {x_n.shape}")

        if self.last_input is None:
            self.last_input = x_n
            self.last_output = np.zeros(3)

        k = high_pass_coefficient(self.tau_ms, period_ms)
        y_n = k * (self.last_output + x_n - self.last_input)
        logger.debug("ACC FILTER: %s -> %s", x_n, y_n)

        self.last_input = x_n
        self.last_output = y_n
        return y_n

    def reset(self):
        """Forget the signal history."""
        self.last_input = None
        self.last_output = None
