"""
AQI category bands and health advice.

Bands follow the US EPA AQI scale. Readings are classified by ascending
upper bounds; anything above 300 falls into Hazardous.
"""

from __future__ import annotations

from enum import Enum


class AQICategory(Enum):
    GOOD = (0, 50, "Good", "Good (0-50)")
    MODERATE = (1, 100, "Moderate", "Moderate (51-100)")
    UNHEALTHY_SENSITIVE = (
        2,
        150,
        "Unhealthy for Sensitive",
        "Unhealthy for Sensitive Groups (101-150)",
    )
    UNHEALTHY = (3, 200, "Unhealthy", "Unhealthy (151-200)")
    VERY_UNHEALTHY = (4, 300, "Very Unhealthy", "Very Unhealthy (201-300)")
    # Open-ended; the upper bound is never consulted.
    HAZARDOUS = (5, None, "Hazardous", "Hazardous (301+)")

    def __init__(self, ordinal, upper, label, range_label):
        self.ordinal = ordinal
        self.upper = upper
        self.label = label
        self.range_label = range_label


# Bands with a finite upper bound, in ascending order.
_BOUNDED = tuple(c for c in AQICategory if c.upper is not None)

HAZARDOUS_THRESHOLD = 200


def aqi_category(aqi: int) -> AQICategory:
    """
    Map an AQI value to its category band.
    """
    a = int(aqi)
    for category in _BOUNDED:
        if a <= category.upper:
            return category
    return AQICategory.HAZARDOUS


def is_hazardous(aqi: int) -> bool:
    return int(aqi) > HAZARDOUS_THRESHOLD


def health_recommendation(average_aqi: float) -> str:
    """
    Advice for the period, chosen by thresholding the average AQI.
    """
    avg = float(average_aqi)
    if avg <= 50:
        return "Air quality is generally good for outdoor activities"
    if avg <= 100:
        return "Moderate air quality - sensitive individuals should be cautious"
    if avg <= 150:
        return "Unhealthy for sensitive groups - limit outdoor exposure"
    return "Poor air quality - consider indoor activities and air purifiers"
