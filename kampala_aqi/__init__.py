"""Simulated city air-quality monitoring and 30-day AQI analysis."""

__version__ = "0.1.0"
