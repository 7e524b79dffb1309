"""Unit tests for the line-oriented event codec.

Usage
-----
Run with pytest::

    pytest tests/unit/test_event_codec.py

"""

from __future__ import annotations

import msgspec
import pytest

from buildhook.events import (
    Event,
    EventType,
    InvalidEventFormatError,
    decode_event,
    encode_event,
)


def _payload(*values: str) -> str:
    labels = (
        "type:   ",
        "owner:  ",
        "repo:   ",
        "branch: ",
        "commit: ",
        "bowner: ",
        "brepo:  ",
        "bbranch:",
    )
    return "".join(f"{label}{value}\n" for label, value in zip(labels, values))


class TestDecodeEvent:
    """Tests for decode_event on well-formed payloads."""

    def test_decodes_push_event(self, push_payload: str, push_event: Event) -> None:
        """The five-line push payload decodes to the expected event."""
        assert decode_event(push_payload) == push_event, "wrong push event"

    def test_push_event_has_no_base_fields(self, push_payload: str) -> None:
        """Push events leave every base field unset."""
        event = decode_event(push_payload)
        assert event.type is EventType.PUSH
        assert (event.base_owner, event.base_repo, event.base_branch) == (
            None,
            None,
            None,
        ), "push events must not carry base fields"

    def test_decodes_pull_request_event(
        self, pull_request_payload: str, pull_request_event: Event
    ) -> None:
        """The eight-line pull request payload decodes with base fields."""
        assert decode_event(pull_request_payload) == pull_request_event

    def test_accepts_bytes(self, push_payload: str, push_event: Event) -> None:
        """UTF-8 bytes decode the same as text."""
        assert decode_event(push_payload.encode("utf-8")) == push_event

    def test_strips_surrounding_whitespace(
        self, push_payload: str, push_event: Event
    ) -> None:
        """Leading and trailing whitespace around the payload is ignored."""
        padded = f"\n\t  {push_payload}\n\n \t"
        assert decode_event(padded) == push_event

    def test_ignores_label_text(self) -> None:
        """Values are taken by position; label text is not checked."""
        payload = "kind:   push\nwho:    alice\nwhat:   widget\nref:    main\nsha:    abc123"
        event = decode_event(payload)
        assert event.summary == "alice widget main abc123"

    def test_keeps_interior_spaces_in_values(self) -> None:
        """Only the fixed label width is skipped; the rest is the value."""
        event = decode_event(_payload("push", "alice", "widget", " main", "abc123"))
        assert event.branch == " main", "per-line trimming must not happen"

    @pytest.mark.parametrize("padding", ["\r", "\xa0", "\u3000", "\x0b"])
    def test_keeps_other_whitespace_around_payload(self, padding: str) -> None:
        """Only newlines, tabs and spaces are stripped from the payload ends."""
        payload = _payload("push", "a", "r", "b", f"abc{padding}")
        assert decode_event(payload).commit == f"abc{padding}"


class TestDecodeEventRejections:
    """Tests for structural failures reported as InvalidEventFormatError."""

    @pytest.mark.parametrize("line_count", [1, 2, 4, 6, 7, 9, 12])
    def test_rejects_line_counts_other_than_five_or_eight(
        self, line_count: int
    ) -> None:
        """Only payloads of exactly 5 or 8 lines are accepted."""
        payload = "\n".join(["type:   push"] + ["value:  x"] * (line_count - 1))
        with pytest.raises(InvalidEventFormatError):
            decode_event(payload)

    @pytest.mark.parametrize("payload", ["", "   ", "\n\n\n"])
    def test_rejects_empty_payloads(self, payload: str) -> None:
        """Blank payloads collapse to a single line and fail."""
        with pytest.raises(InvalidEventFormatError):
            decode_event(payload)

    @pytest.mark.parametrize("short_index", [0, 1, 2, 3, 4])
    def test_rejects_short_line_in_push(self, short_index: int) -> None:
        """Any line shorter than eight characters fails the payload."""
        lines = ["type:   push", "owner:  a", "repo:   r", "branch: b", "commit: c"]
        lines[short_index] = "short"
        with pytest.raises(InvalidEventFormatError):
            decode_event("\n".join(lines))

    def test_rejects_short_base_line_in_pull_request(self) -> None:
        """Short lines in the pull-request section also fail."""
        payload = _payload(
            "pull_request", "bob", "fork", "topic", "123", "alice", "widget", ""
        )
        payload = payload.replace("bbranch:\n", "bbr\n")
        with pytest.raises(InvalidEventFormatError):
            decode_event(payload)

    def test_rejects_unknown_type(self) -> None:
        """The first value must be push or pull_request."""
        with pytest.raises(InvalidEventFormatError):
            decode_event(_payload("release", "alice", "widget", "main", "abc123"))

    @pytest.mark.parametrize("event_type", ["Push", "push ", "pull-request"])
    def test_rejects_near_miss_types(self, event_type: str) -> None:
        """Type matching is exact."""
        with pytest.raises(InvalidEventFormatError):
            decode_event(_payload(event_type, "alice", "widget", "main", "abc123"))

    def test_rejects_push_with_eight_lines(self) -> None:
        """A push payload carrying base lines is malformed."""
        payload = _payload(
            "push", "alice", "widget", "main", "abc123", "alice", "widget", "main"
        )
        with pytest.raises(InvalidEventFormatError):
            decode_event(payload)

    def test_rejects_pull_request_with_five_lines(self) -> None:
        """A pull request without base lines is malformed."""
        payload = _payload("pull_request", "bob", "fork", "topic", "123")
        with pytest.raises(InvalidEventFormatError):
            decode_event(payload)

    def test_rejects_empty_value(self) -> None:
        """A line holding only its label yields no usable value."""
        payload = "type:   push\nowner:  \nrepo:   widget\nbranch: main\ncommit: abc123"
        with pytest.raises(InvalidEventFormatError):
            decode_event(payload)

    def test_rejects_invalid_utf8(self) -> None:
        """Undecodable bytes are a format error, not a crash."""
        with pytest.raises(InvalidEventFormatError):
            decode_event(b"type:   push\nowner:  \xff\xfe\n")

    def test_rejects_crlf_line_endings(self, push_payload: str) -> None:
        """Carriage returns stay in the values and break the type check."""
        with pytest.raises(InvalidEventFormatError):
            decode_event(push_payload.replace("\n", "\r\n"))

    def test_error_is_a_value_error(self) -> None:
        """Callers may catch the codec error as ValueError."""
        with pytest.raises(ValueError, match="Invalid format"):
            decode_event("nope")


class TestEncodeEvent:
    """Tests for encode_event."""

    def test_encodes_concrete_push_scenario(
        self, push_payload: str, push_event: Event
    ) -> None:
        """The alice/widget push renders byte-for-byte."""
        assert encode_event(push_event) == push_payload

    def test_encodes_pull_request(
        self, pull_request_payload: str, pull_request_event: Event
    ) -> None:
        """Pull requests render eight lines with base labels."""
        assert encode_event(pull_request_event) == pull_request_payload

    def test_every_label_is_eight_characters(self, pull_request_event: Event) -> None:
        """Each rendered line has its value starting at offset eight."""
        for line, value in zip(
            encode_event(pull_request_event).splitlines(),
            [
                "pull_request",
                "bob",
                "widget-fork",
                "feature/login",
                "9f8e7d6c",
                "alice",
                "widget",
                "main",
            ],
            strict=True,
        ):
            assert line[8:] == value, f"value misaligned in {line!r}"

    def test_encoding_is_total(self) -> None:
        """Encoding never validates, even for incomplete pull requests."""
        event = Event(
            type=EventType.PULL_REQUEST,
            owner="",
            repo="widget",
            branch="main",
            commit="abc123",
        )
        text = encode_event(event)
        assert text.count("\n") == 8
        assert text.endswith("bbranch:\n")

    def test_round_trips_concrete_events(
        self, push_event: Event, pull_request_event: Event
    ) -> None:
        """Decoding an encoded event returns an equal event."""
        for event in (push_event, pull_request_event):
            assert decode_event(encode_event(event)) == event

    @pytest.mark.parametrize("suffix", ["\r", "\xa0"])
    def test_round_trips_trailing_non_padding_whitespace(
        self, suffix: str, pull_request_event: Event
    ) -> None:
        """A last value ending in CR or NBSP survives encode then decode."""
        push = Event(
            type=EventType.PUSH,
            owner="a",
            repo="r",
            branch="b",
            commit=f"abc{suffix}",
        )
        pull_request = msgspec.structs.replace(
            pull_request_event, base_branch=f"main{suffix}"
        )
        for event in (push, pull_request):
            assert decode_event(encode_event(event)) == event
