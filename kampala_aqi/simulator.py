"""
Simulated city-wide daily AQI readings.

Each day is an independent uniform draw from the fixed AQI range; there is
no trend or seasonality.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Tuple


log = logging.getLogger(__name__)

AQI_MIN = 1
AQI_MAX = 300
DEFAULT_DAYS = 30


class ReadingSimulator:
    """
    Produces one AQI reading per simulated day.
    """

    def __init__(self, *, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def generate(self, days: int = DEFAULT_DAYS) -> Tuple[int, ...]:
        """
        Generate `days` readings; position i holds the reading for day i + 1.
        """
        days = int(days)
        if days < 1:
            raise ValueError(f"Need at least one day of readings, got {days}.")

        readings = tuple(self._rng.randint(AQI_MIN, AQI_MAX) for _ in range(days))
        log.info("Generated %d days of AQI data (range %d-%d)", days, AQI_MIN, AQI_MAX)
        return readings


def generate_readings(days: int = DEFAULT_DAYS, *, seed: Optional[int] = None) -> Tuple[int, ...]:
    return ReadingSimulator(seed=seed).generate(days)
