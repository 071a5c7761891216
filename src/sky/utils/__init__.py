"""Common utility functions and helpers for the sky package."""

from sky.utils.formatting import format_amount, format_percentage, format_temperature
from sky.utils.time import TimeUtils

__all__ = [
    "TimeUtils",
    "format_amount",
    "format_percentage",
    "format_temperature",
]
