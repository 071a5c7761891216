"""Text and number formatting utilities."""

from __future__ import annotations


def format_temperature(temp: float, unit: str = "°C") -> str:
    """Format temperature value with unit.

    Args:
        temp: Temperature value
        unit: Temperature unit label as reported by the API

    Returns:
        Formatted temperature string
    """
    return f"{round(temp)}{unit}"


def format_percentage(value: float) -> str:
    """Format value as percentage.

    Args:
        value: Value to format (0-100, as the API reports probabilities)

    Returns:
        Formatted percentage string
    """
    return f"{round(value)}%"


def format_amount(value: float, unit: str) -> str:
    """Format a measured amount (wind speed, precipitation) with its unit."""
    return f"{value:g} {unit}".rstrip()
