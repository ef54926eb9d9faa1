"""Error handling utilities for position and event queries."""

import sys
import traceback
from typing import Optional


class SunposError(Exception):
    """Base exception for sunpos-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class NoEventError(SunposError):
    """Raised when a body does not rise or set on the requested day."""

    def __init__(self, event: str, jd0: float, latitude: float, cos_hour_angle: float):
        self.event = event
        self.jd0 = jd0
        self.latitude = latitude
        self.cos_hour_angle = cos_hour_angle

        if cos_hour_angle > 1.0:
            reason = "the body stays below the horizon all day"
        else:
            reason = "the body stays above the horizon all day"

        message = (
            f"No {event} on the day starting at JD {jd0:.1f} "
            f"for latitude {latitude:.4f}°: {reason}"
        )
        suggestions = [
            "Query a different date; polar day and polar night end with the season",
            "Transit times are still available for this day",
        ]
        super().__init__(message, suggestions)


class InvalidLocationError(SunposError):
    """Raised when an observer location is outside the valid ranges."""

    def __init__(self, field: str, value: float, valid_range: tuple[float, float]):
        self.field = field
        self.value = value
        message = (
            f"Invalid {field}: {value} "
            f"(expected a value in [{valid_range[0]}, {valid_range[1]}])"
        )
        suggestions = [
            "Latitude is positive north, longitude is positive east, both in degrees",
        ]
        super().__init__(message, suggestions)


class InvalidCoordinateError(SunposError):
    """Raised when a coordinate value is malformed."""

    def __init__(self, name: str, value: float):
        self.name = name
        self.value = value
        message = f"Invalid coordinate component {name}: {value}"
        suggestions = [
            "Radius vectors must be finite and non-negative",
        ]
        super().__init__(message, suggestions)


class TimeParseError(SunposError):
    """Raised when a UTC time cannot be parsed."""

    def __init__(self, utc_time: str):
        message = f"Invalid UTC time format: '{utc_time}'"
        suggestions = [
            "Use ISO-8601 format with 'Z' suffix for UTC (e.g., '2020-10-22T06:15:00Z')",
            "Omit the option to use the current time",
        ]
        super().__init__(message, suggestions)


class EarthModelError(SunposError):
    """Raised when an Earth orbital model name is not recognized."""

    def __init__(self, name: str, available: list[str]):
        message = f"Unknown Earth model: '{name}'"
        suggestions = [
            f"Available models: {', '.join(sorted(available))}",
            "Set SUNPOS_EARTH_MODEL or pass --earth-model",
        ]
        super().__init__(message, suggestions)


class EphemerisUnavailableError(SunposError):
    """Raised when a JPL ephemeris file cannot be loaded."""

    def __init__(self, path: str, reason: str):
        message = f"Could not load ephemeris '{path}': {reason}"
        suggestions = [
            "Check network access for the first download, or copy the file into SUNPOS_DATA_DIR",
            "Use the built-in model with --earth-model vsop87",
        ]
        super().__init__(message, suggestions)


class ConvergenceWarning(UserWarning):
    """Issued when the event solver stops at its iteration bound."""


def print_error(error: Exception) -> None:
    """Print error to stderr with formatted output.

    Args:
        error: Exception to print
    """
    print(f"Error: {error}", file=sys.stderr)


def handle_error(error: Exception, context: Optional[str] = None) -> int:
    """Handle an error with optional context and return exit code.

    Args:
        error: Exception that occurred
        context: Optional description of what was being attempted

    Returns:
        Exit code (1 for error)
    """
    if context:
        print(f"Error while {context}:", file=sys.stderr)

    print_error(error)

    if not isinstance(error, SunposError):
        traceback.print_exc()

    return 1
