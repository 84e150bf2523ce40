# File: aqi_sim/exceptions.py

"""
Custom exception hierarchy for the AQI rule simulator.

All project-specific errors derive from AQISimError so callers can catch
them as a group. Parse and metrics errors also subclass ValueError.
"""


class AQISimError(Exception):
    """Base class for all simulator errors."""


# --- Configuration ---
class ConfigError(AQISimError):
    """Raised when the configuration file cannot be parsed or loaded."""


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """Raised when the configuration file does not exist."""


# --- Input Parsing ---
class SampleParseError(AQISimError, ValueError):
    """Raised when an interactive sample line cannot be parsed.

    Attributes:
        line (str | None): The raw input line that failed to parse.
    """

    def __init__(self, message, line=None):
        super().__init__(message)
        self.line = line

    def __str__(self):
        base = super().__str__()
        if self.line is not None:
            return f"{base} (input: {self.line!r})"
        return base


# --- Evaluation ---
class MetricsInputError(AQISimError, ValueError):
    """Raised when label sequences passed to the metrics engine are inconsistent."""
