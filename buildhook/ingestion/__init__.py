"""Bounded ingestion queue, its owning server value, and the queue consumer."""

from __future__ import annotations

from .consumer import EventConsumer, log_event_summary
from .errors import (
    IngestionError,
    IngestionQueueClosedError,
    IngestionQueueFullError,
    ServerConfigError,
)
from .queue import DEFAULT_QUEUE_CAPACITY, IngestionQueue
from .server import Server, ServerConfig

__all__ = [
    "DEFAULT_QUEUE_CAPACITY",
    "EventConsumer",
    "IngestionError",
    "IngestionQueue",
    "IngestionQueueClosedError",
    "IngestionQueueFullError",
    "Server",
    "ServerConfig",
    "ServerConfigError",
    "log_event_summary",
]
