"""Webhook event model and its line-oriented text codec."""

from __future__ import annotations

from .codec import (
    LABEL_WIDTH,
    PULL_REQUEST_LINE_COUNT,
    PUSH_LINE_COUNT,
    decode_event,
    encode_event,
)
from .errors import InvalidEventFormatError
from .models import Event, EventType

__all__ = [
    "LABEL_WIDTH",
    "PULL_REQUEST_LINE_COUNT",
    "PUSH_LINE_COUNT",
    "Event",
    "EventType",
    "InvalidEventFormatError",
    "decode_event",
    "encode_event",
]
