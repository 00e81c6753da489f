"""
Recorded SensorTag traces.

A trace is a CSV file with one sensor update per line:

    period_ms,x,y,z[,left,right]

x, y and z are in g. left and right are 0/1 button levels; when missing,
both buttons are treated as up. A header line and '#' comments are allowed.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SensorSample:
    """One sensor update: accelerometer reading plus button levels."""
    period_ms: float
    x: float
    y: float
    z: float
    left: bool = False
    right: bool = False


def _header_rows(path: Path) -> int:
    """Number of physical lines to skip: up to and including a header line."""
    with open(path, "r", encoding="utf-8") as f:
        for index, line in enumerate(f):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            return index + 1 if any(ch.isalpha() for ch in line) else 0
    return 0


def load_trace(path: Union[str, Path]) -> List[SensorSample]:
    """
    Load a recorded trace.

    Args:
        path: CSV file to read.

    Returns:
        The samples, in file order.

    Raises:
        ValueError: if a row doesn't have 4 or 6 columns, or a period
            isn't positive.
    """
    path = Path(path)
    data = np.loadtxt(
        path,
        delimiter=",",
        comments="#",
        skiprows=_header_rows(path),
        ndmin=2,
    )

    if data.size == 0:
        logger.warning("Trace %s is empty", path)
        return []

    columns = data.shape[1]
    if columns not in (4, 6):
        raise ValueError(f"{path}: expected 4 or 6 columns, got {columns}")

    if np.any(data[:, 0] <= 0):
        raise ValueError(f"{path}: sample periods must be positive")

    samples = []
    for row in data:
        left = right = False
        if columns == 6:
            left, right = bool(row[4]), bool(row[5])
        samples.append(SensorSample(
            period_ms=float(row[0]),
            x=float(row[1]),
            y=float(row[2]),
            z=float(row[3]),
            left=left,
            right=right,
        ))

    logger.info("Loaded %d samples from %s", len(samples), path)
    return samples
