"""buildhook: receive push and pull-request webhooks and queue them for builds."""

from __future__ import annotations

from buildhook.events import Event, EventType, decode_event, encode_event
from buildhook.ingestion import IngestionQueue, Server, ServerConfig

__all__ = [
    "Event",
    "EventType",
    "IngestionQueue",
    "Server",
    "ServerConfig",
    "decode_event",
    "encode_event",
]
