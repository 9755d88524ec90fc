"""Exceptions raised by the skin subsystem."""

from __future__ import annotations


class SkinError(Exception):
    """Base class for skin errors."""


class SkinDecodeError(SkinError):
    """Raised when a skin definition cannot be read or decoded.

    Attributes:
        path: Dotted document path of the offending field, if known.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Description of the problem.
            path: Dotted document path of the offending field.
        """
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path


class ListenerError(SkinError):
    """Raised after notification when one or more listeners failed.

    Attributes:
        failures: (listener, exception) pairs in notification order.
    """

    def __init__(self, failures: list[tuple[object, Exception]]) -> None:
        """Initialize the error.

        Args:
            failures: (listener, exception) pairs in notification order.
        """
        names = ", ".join(type(listener).__name__ for listener, _ in failures)
        super().__init__(f"{len(failures)} skin listener(s) failed: {names}")
        self.failures = failures
