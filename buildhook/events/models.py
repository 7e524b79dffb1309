"""Typed webhook event structures."""

from __future__ import annotations

import enum

import msgspec


class EventType(enum.StrEnum):
    """Kinds of webhook notification understood by buildhook."""

    PUSH = "push"
    PULL_REQUEST = "pull_request"


class Event(msgspec.Struct, frozen=True, kw_only=True, omit_defaults=True):
    """A decoded push or pull-request notification.

    Attributes
    ----------
    type : EventType
        Notification kind.
    owner : str
        Owner of the repository the event happened in.
    repo : str
        Repository name.
    branch : str
        Branch the event took place on.
    commit : str
        Head commit attached to the event. Not format-validated.
    base_owner : str, optional
        Owner of the base repository; set only for pull requests.
    base_repo : str, optional
        Base repository name; set only for pull requests.
    base_branch : str, optional
        Base branch the pull request targets; set only for pull requests.

    """

    type: EventType
    owner: str
    repo: str
    branch: str
    commit: str
    base_owner: str | None = None
    base_repo: str | None = None
    base_branch: str | None = None

    @property
    def is_pull_request(self) -> bool:
        """Return True for pull-request events."""
        return self.type == EventType.PULL_REQUEST

    @property
    def slug(self) -> str:
        """Return the GitHub-style owner/repo identifier."""
        return f"{self.owner}/{self.repo}"

    @property
    def summary(self) -> str:
        """Return ``owner repo branch commit`` joined by single spaces."""
        return f"{self.owner} {self.repo} {self.branch} {self.commit}"


__all__ = ["Event", "EventType"]
