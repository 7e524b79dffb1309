"""Line-oriented text codec for webhook events.

An encoded event is five lines for a push and eight for a pull request.
Every line starts with an eight character label and the value follows
immediately after it::

    type:   push
    owner:  alice
    repo:   widget
    branch: main
    commit: abc123

Pull requests append ``bowner: ``, ``brepo:  `` and ``bbranch:`` lines. The
decoder never reads the label text; a value's meaning comes from its line
position alone. There is no escaping, so a value containing a newline cannot
be represented.
"""

from __future__ import annotations

import typing as typ

from .errors import InvalidEventFormatError
from .models import Event, EventType

LABEL_WIDTH = 8
PUSH_LINE_COUNT = 5
PULL_REQUEST_LINE_COUNT = 8

_FIELD_LABELS: tuple[tuple[str, str], ...] = (
    ("type", "type:   "),
    ("owner", "owner:  "),
    ("repo", "repo:   "),
    ("branch", "branch: "),
    ("commit", "commit: "),
    ("base_owner", "bowner: "),
    ("base_repo", "brepo:  "),
    ("base_branch", "bbranch:"),
)

_VALID_LINE_COUNTS = frozenset({PUSH_LINE_COUNT, PULL_REQUEST_LINE_COUNT})
_PAYLOAD_PADDING = "\n\t "

Payload: typ.TypeAlias = str | bytes | bytearray | memoryview


def _as_text(payload: Payload) -> str:
    if isinstance(payload, str):
        return payload
    try:
        return bytes(payload).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEventFormatError.undecodable() from exc


def _expected_line_count(event_type: EventType) -> int:
    if event_type == EventType.PULL_REQUEST:
        return PULL_REQUEST_LINE_COUNT
    return PUSH_LINE_COUNT


def decode_event(payload: Payload) -> Event:
    """Decode a raw webhook body into an :class:`Event`.

    Newlines, tabs and spaces around the whole payload are stripped before
    it is split on ``\\n``. Other whitespace such as ``\\r`` or a no-break
    space is kept, and individual lines are not trimmed.

    Parameters
    ----------
    payload : str | bytes
        Raw request body. Bytes are decoded as UTF-8.

    Returns
    -------
    Event
        Fully populated event.

    Raises
    ------
    InvalidEventFormatError
        If the payload has neither 5 nor 8 lines, a line is shorter than its
        label, the type is unknown, the line count does not match the type,
        or a value is empty.

    """
    lines = _as_text(payload).strip(_PAYLOAD_PADDING).split("\n")
    count = len(lines)
    if count not in _VALID_LINE_COUNTS:
        raise InvalidEventFormatError.line_count(count)

    for index, line in enumerate(lines, start=1):
        if len(line) < LABEL_WIDTH:
            raise InvalidEventFormatError.short_line(index)

    values = [line[LABEL_WIDTH:] for line in lines]

    try:
        event_type = EventType(values[0])
    except ValueError as exc:
        raise InvalidEventFormatError.unknown_type(values[0]) from exc

    if count != _expected_line_count(event_type):
        raise InvalidEventFormatError.arity_mismatch(event_type, count)

    names = [name for name, _label in _FIELD_LABELS[1:count]]
    fields = dict(zip(names, values[1:], strict=True))
    for name, value in fields.items():
        if not value:
            raise InvalidEventFormatError.empty_field(name)

    return Event(type=event_type, **fields)


def _render(value: object) -> str:
    return "" if value is None else str(value)


def encode_event(event: Event) -> str:
    """Render ``event`` as labelled lines, each terminated by ``\\n``.

    Encoding performs no validation; missing pull-request base fields are
    written as empty values.
    """
    count = (
        PULL_REQUEST_LINE_COUNT if event.is_pull_request else PUSH_LINE_COUNT
    )
    return "".join(
        f"{label}{_render(getattr(event, name))}\n"
        for name, label in _FIELD_LABELS[:count]
    )


__all__ = [
    "LABEL_WIDTH",
    "PULL_REQUEST_LINE_COUNT",
    "PUSH_LINE_COUNT",
    "Payload",
    "decode_event",
    "encode_event",
]
