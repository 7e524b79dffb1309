"""Errors raised by the ingestion queue and server configuration."""

from __future__ import annotations


class IngestionError(Exception):
    """Base class for ingestion errors."""


class IngestionQueueFullError(IngestionError):
    """Raised when an event is offered to a queue that is at capacity.

    The event is dropped; the queue never retries or buffers it elsewhere.

    Attributes
    ----------
    capacity
        Capacity of the queue that rejected the event.

    """

    def __init__(self, capacity: int) -> None:
        """Record the capacity that was exceeded."""
        self.capacity = capacity
        super().__init__(f"Ingestion queue is full ({capacity} events buffered)")


class IngestionQueueClosedError(IngestionError):
    """Raised when a closed queue is offered an event or has nothing left."""

    @classmethod
    def for_offer(cls) -> IngestionQueueClosedError:
        """Return an error for an offer made after shutdown."""
        return cls("Ingestion queue is closed to new events")

    @classmethod
    def exhausted(cls) -> IngestionQueueClosedError:
        """Return an error for a take on a closed, empty queue."""
        return cls("Ingestion queue is closed and drained")


class ServerConfigError(ValueError):
    """Raised when server configuration values are invalid."""

    @classmethod
    def invalid_port(cls, port: object) -> ServerConfigError:
        """Return an error for a port outside 1-65535."""
        return cls(f"port must be an integer in 1-65535, got: {port!r}")

    @classmethod
    def invalid_path(cls, path: object) -> ServerConfigError:
        """Return an error for a webhook path that is not absolute."""
        return cls(f"path must start with '/', got: {path!r}")

    @classmethod
    def invalid_capacity(cls, capacity: object) -> ServerConfigError:
        """Return an error for a non-positive queue capacity."""
        return cls(f"queue capacity must be a positive integer, got: {capacity!r}")

    @classmethod
    def not_an_integer(cls, env_var: str, raw: str) -> ServerConfigError:
        """Return an error for an environment value that is not an integer."""
        return cls(f"{env_var} must be an integer, got: {raw!r}")


__all__ = [
    "IngestionError",
    "IngestionQueueClosedError",
    "IngestionQueueFullError",
    "ServerConfigError",
]
