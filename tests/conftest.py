"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import typing as typ

import pytest

from buildhook.events import Event, EventType

PUSH_PAYLOAD = (
    "type:   push\n"
    "owner:  alice\n"
    "repo:   widget\n"
    "branch: main\n"
    "commit: abc123\n"
)

PULL_REQUEST_PAYLOAD = (
    "type:   pull_request\n"
    "owner:  bob\n"
    "repo:   widget-fork\n"
    "branch: feature/login\n"
    "commit: 9f8e7d6c\n"
    "bowner: alice\n"
    "brepo:  widget\n"
    "bbranch:main\n"
)


@pytest.fixture
def push_payload() -> str:
    """Return the encoded push event for alice/widget."""
    return PUSH_PAYLOAD


@pytest.fixture
def pull_request_payload() -> str:
    """Return the encoded pull request from bob/widget-fork into alice/widget."""
    return PULL_REQUEST_PAYLOAD


@pytest.fixture
def push_event() -> Event:
    """Return the decoded form of ``push_payload``."""
    return Event(
        type=EventType.PUSH,
        owner="alice",
        repo="widget",
        branch="main",
        commit="abc123",
    )


@pytest.fixture
def pull_request_event() -> Event:
    """Return the decoded form of ``pull_request_payload``."""
    return Event(
        type=EventType.PULL_REQUEST,
        owner="bob",
        repo="widget-fork",
        branch="feature/login",
        commit="9f8e7d6c",
        base_owner="alice",
        base_repo="widget",
        base_branch="main",
    )


def _build_push_event(commit: str) -> Event:
    return Event(
        type=EventType.PUSH,
        owner="alice",
        repo="widget",
        branch="main",
        commit=commit,
    )


@pytest.fixture
def make_push_event() -> typ.Callable[[str], Event]:
    """Return a factory building alice/widget push events for a commit."""
    return _build_push_event
