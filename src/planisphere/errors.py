"""Error handling utilities for sky computations."""

import sys
from typing import Optional


class PlanisphereError(Exception):
    """Base exception for planisphere-specific errors."""

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


class InvalidArgumentError(PlanisphereError, ValueError):
    """Raised when an argument violates a precondition."""


class OutOfIntervalError(InvalidArgumentError):
    """Raised when a value lies outside its required interval."""

    def __init__(self, what: str, value: float, interval: object):
        self.value = value
        message = f"{what} {value!r} is outside {interval}"
        suggestions = [f"Provide a {what} within {interval}"]
        super().__init__(message, suggestions)


class MissingValueError(PlanisphereError, TypeError):
    """Raised when a required value is None."""

    def __init__(self, what: str):
        super().__init__(f"Missing required value: {what}")


class StarNotInCatalogueError(InvalidArgumentError, LookupError):
    """Raised when an asterism references a star absent from the catalogue."""

    def __init__(self, star_name: str, constellation: str):
        message = (
            f"Asterism '{constellation}' references star '{star_name}' "
            f"which is not in the catalogue star list"
        )
        suggestions = [
            "Add the star to the builder before adding the asterism",
            "Asterism membership is checked by identity, not by name",
        ]
        super().__init__(message, suggestions)


class UnknownAsterismError(InvalidArgumentError, LookupError):
    """Raised when indices are requested for an asterism not in the catalogue."""

    def __init__(self, constellation: str):
        message = f"Asterism '{constellation}' is not part of this catalogue"
        suggestions = ["Query asterisms obtained from the same catalogue"]
        super().__init__(message, suggestions)


class BuilderFinalizedError(PlanisphereError, RuntimeError):
    """Raised when a catalogue builder is used after build()."""

    def __init__(self):
        message = "Catalogue builder has already been finalized"
        suggestions = ["Create a new CatalogueBuilder for each catalogue"]
        super().__init__(message, suggestions)


class CatalogueLoadError(PlanisphereError):
    """Raised when a catalogue source cannot be read."""

    def __init__(self, source: str, reason: str):
        message = f"Could not load catalogue from {source}: {reason}"
        suggestions = [
            "Check that the file exists and is readable",
            "Catalogue files are expected to be ASCII text",
        ]
        super().__init__(message, suggestions)


class CatalogueFormatError(CatalogueLoadError):
    """Raised when a catalogue line cannot be parsed."""

    def __init__(self, source: str, line_number: int, reason: str):
        self.line_number = line_number
        super().__init__(source, f"line {line_number}: {reason}")


class TimeParseError(PlanisphereError):
    """Raised when an observation time cannot be parsed."""

    def __init__(self, utc_time: str):
        message = f"Invalid UTC time format: '{utc_time}'"
        suggestions = [
            "Use ISO-8601 format with 'Z' suffix for UTC (e.g., '2020-04-22T20:30:00Z')",
            "Omit the option to use the current time",
        ]
        super().__init__(message, suggestions)


def print_error(error: Exception) -> None:
    """Print error to stderr with formatted output.

    Args:
        error: Exception to print
    """
    print(f"Error: {error}", file=sys.stderr)

    if isinstance(error, PlanisphereError):
        if error.suggestions:
            print(file=sys.stderr)


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

    import traceback

    if not isinstance(error, PlanisphereError):
        traceback.print_exc()

    return 1
