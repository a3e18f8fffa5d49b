"""
Error types for storydesk layout resolution, composition and configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class StorydeskError(Exception):
    """Base exception for all storydesk errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ConfigError(StorydeskError):
    """
    Raised when storydesk.toml cannot be loaded.

    Examples:
    - Malformed TOML
    - Non-numeric fitness thresholds
    - Negative dedup window
    """

    pass


class LayoutError(StorydeskError):
    """
    Raised when a layout invariant is violated.

    Examples:
    - Template declared with no slots or more than the slot cap
    - Candidate selection returning more panels than the template has slots
    """

    pass


class DirectiveError(StorydeskError):
    """
    Raised when a composition directive is structurally unusable.

    Unknown panel types, roles and layouts are filtered silently; only a
    directive whose action cannot be recognised raises.
    """

    pass


class PersistenceError(StorydeskError):
    """
    Raised when workspace state cannot be serialized or stored.

    The persistence layer catches this and logs it; in-memory state stays
    authoritative.
    """

    pass


@dataclass
class ErrorContext:
    """
    Source location for an error, used for config files.

    Attributes:
        file: Path to the file where the error occurred
        key: Dotted key within the file (e.g. "layout.dedup_window_ms")
    """

    file: Path
    key: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "storydesk.toml [layout.dedup_window_ms]"
        """
        if self.key:
            return f"{self.file} [{self.key}]"
        return str(self.file)


__all__ = [
    "StorydeskError",
    "ConfigError",
    "LayoutError",
    "DirectiveError",
    "PersistenceError",
    "ErrorContext",
]
