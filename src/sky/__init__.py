"""Open-Meteo weather client with normalized current, hourly and daily views."""

__version__ = "0.1.0"
