"""
Statistics over a period of daily AQI readings:
- Median (sort-based), average, min/max
- Hazardous-day records (AQI > 200)
- Category distribution across the six AQI bands
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict, List, Sequence, Tuple

import numpy as np
import pandas as pd

from kampala_aqi.aqi import AQICategory, aqi_category, is_hazardous


log = logging.getLogger(__name__)


def _as_array(readings: Sequence[int]) -> np.ndarray:
    values = np.asarray(readings, dtype=int)
    if values.size == 0:
        raise ValueError("Need at least one reading.")
    return values


def median(readings: Sequence[int]) -> float:
    """
    Middle value of the sorted readings; mean of the two central values
    for an even count. The input is left untouched.
    """
    ordered = np.sort(_as_array(readings))
    n = ordered.size
    mid = n // 2
    if n % 2 == 0:
        return float((ordered[mid - 1] + ordered[mid]) / 2.0)
    return float(ordered[mid])


def average(readings: Sequence[int]) -> float:
    return float(_as_array(readings).mean())


def minimum(readings: Sequence[int]) -> int:
    return int(_as_array(readings).min())


def maximum(readings: Sequence[int]) -> int:
    return int(_as_array(readings).max())


@dataclass(frozen=True)
class HazardousDay:
    day: int
    aqi: int

    @property
    def category(self) -> AQICategory:
        return aqi_category(self.aqi)


def hazardous_days(readings: Sequence[int]) -> List[HazardousDay]:
    """
    Days (1-based) whose reading exceeds the hazardous threshold, in day order.
    """
    return [
        HazardousDay(day=i, aqi=int(value))
        for i, value in enumerate(readings, start=1)
        if is_hazardous(value)
    ]


def count_hazardous(readings: Sequence[int]) -> int:
    return len(hazardous_days(readings))


def category_histogram(readings: Sequence[int]) -> Dict[AQICategory, int]:
    """
    Count of readings per category, in band order. Every band is present.
    """
    categories = pd.Series([aqi_category(v) for v in readings], dtype=object)
    counts = categories.value_counts()
    return {category: int(counts.get(category, 0)) for category in AQICategory}


def readings_frame(readings: Sequence[int]) -> pd.DataFrame:
    """
    Daily table: one row per day with its AQI and category.
    """
    values = np.asarray(readings, dtype=int)
    df = pd.DataFrame({"day": np.arange(1, values.size + 1), "aqi": values})
    df["category"] = df["aqi"].map(aqi_category)
    return df


@dataclass(frozen=True)
class AQISummary:
    readings: Tuple[int, ...]
    median: float
    average: float
    minimum: int
    maximum: int
    hazardous_days: Tuple[HazardousDay, ...]
    distribution: Dict[AQICategory, int]

    @property
    def days(self) -> int:
        return len(self.readings)

    @property
    def hazardous_count(self) -> int:
        return len(self.hazardous_days)

    @property
    def hazardous_percentage(self) -> float:
        return self.hazardous_count / self.days * 100.0


def summarize(readings: Sequence[int]) -> AQISummary:
    values = tuple(int(v) for v in readings)
    summary = AQISummary(
        readings=values,
        median=median(values),
        average=average(values),
        minimum=minimum(values),
        maximum=maximum(values),
        hazardous_days=tuple(hazardous_days(values)),
        distribution=category_histogram(values),
    )
    log.info(
        "Summary: days=%d median=%.1f avg=%.1f min=%d max=%d hazardous=%d",
        summary.days,
        summary.median,
        summary.average,
        summary.minimum,
        summary.maximum,
        summary.hazardous_count,
    )
    return summary
