"""
Swiss Grid Simulator - Errors
==============================
"""


class ConfigurationError(Exception):
    """A required collaborator or config entry is missing or invalid.

    Raised for wiring bugs (no display sink, unknown plant category), never
    for out-of-range numbers, which are clamped instead.
    """
