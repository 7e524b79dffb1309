"""Errors raised by the event codec."""

from __future__ import annotations


class InvalidEventFormatError(ValueError):
    """Raised when a payload does not follow the line-oriented event format.

    Every structural failure collapses into this one error kind; the message
    is descriptive but callers should not branch on it.
    """

    def __init__(self, detail: str | None = None) -> None:
        """Attach an optional human-readable detail to the standard message."""
        self.detail = detail
        message = "Unable to parse event string. Invalid format."
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    @classmethod
    def line_count(cls, count: int) -> InvalidEventFormatError:
        """Return an error for payloads that are neither 5 nor 8 lines long."""
        return cls(f"expected 5 or 8 lines, got {count}")

    @classmethod
    def short_line(cls, index: int) -> InvalidEventFormatError:
        """Return an error for a line too short to hold its label."""
        return cls(f"line {index} is shorter than its label")

    @classmethod
    def unknown_type(cls, value: str) -> InvalidEventFormatError:
        """Return an error for an unsupported event type."""
        return cls(f"unsupported event type {value!r}")

    @classmethod
    def arity_mismatch(cls, event_type: str, count: int) -> InvalidEventFormatError:
        """Return an error when the line count does not match the event type."""
        return cls(f"{event_type} events cannot have {count} lines")

    @classmethod
    def empty_field(cls, field: str) -> InvalidEventFormatError:
        """Return an error for a field with no value after its label."""
        return cls(f"{field} must be non-empty")

    @classmethod
    def undecodable(cls) -> InvalidEventFormatError:
        """Return an error for payload bytes that are not valid UTF-8."""
        return cls("payload is not valid UTF-8")


__all__ = ["InvalidEventFormatError"]
