"""Property-based tests for the event codec.

Values may hold any character except a newline, including carriage returns
and Unicode spaces. Only newlines, tabs and spaces are stripped from the
payload ends, so a value may not end in a tab or a space.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from buildhook.events import (
    Event,
    EventType,
    InvalidEventFormatError,
    decode_event,
    encode_event,
)

field_values = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\n"),
    min_size=1,
    max_size=40,
).filter(lambda value: not value.endswith(("\t", " ")))


@st.composite
def push_events(draw: st.DrawFn) -> Event:
    """Generate valid push events."""
    return Event(
        type=EventType.PUSH,
        owner=draw(field_values),
        repo=draw(field_values),
        branch=draw(field_values),
        commit=draw(field_values),
    )


@st.composite
def pull_request_events(draw: st.DrawFn) -> Event:
    """Generate valid pull-request events."""
    return Event(
        type=EventType.PULL_REQUEST,
        owner=draw(field_values),
        repo=draw(field_values),
        branch=draw(field_values),
        commit=draw(field_values),
        base_owner=draw(field_values),
        base_repo=draw(field_values),
        base_branch=draw(field_values),
    )


@given(event=st.one_of(push_events(), pull_request_events()))
def test_decode_inverts_encode(event: Event) -> None:
    """Decoding an encoded valid event yields an equal event."""
    assert decode_event(encode_event(event)) == event


@given(event=st.one_of(push_events(), pull_request_events()))
def test_encoded_line_count_matches_type(event: Event) -> None:
    """Push events encode to 5 lines and pull requests to 8."""
    expected = 8 if event.type is EventType.PULL_REQUEST else 5
    assert encode_event(event).count("\n") == expected


@given(
    count=st.integers(min_value=1, max_value=20).filter(lambda n: n not in {5, 8}),
    value=field_values,
)
def test_other_line_counts_are_rejected(count: int, value: str) -> None:
    """Any line count other than 5 or 8 fails decoding."""
    payload = "\n".join(["type:   push", *([f"field:  {value}"] * (count - 1))])
    with pytest.raises(InvalidEventFormatError):
        decode_event(payload)


@given(event=push_events(), index=st.integers(min_value=0, max_value=4))
def test_short_lines_are_rejected(event: Event, index: int) -> None:
    """Truncating any line below the label width fails decoding."""
    lines = encode_event(event).split("\n")[:-1]
    lines[index] = lines[index][:7]
    with pytest.raises(InvalidEventFormatError):
        decode_event("\n".join(lines))
