"""Shared enumerations used across sky packages."""
