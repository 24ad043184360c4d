"""GitHub Actions event payloads.

The runner writes the triggering webhook payload to ``GITHUB_EVENT_PATH``. Only
the labelable subject of the event is needed: its node ID, title and body.
Webhook reference: https://docs.github.com/en/webhooks/webhook-events-and-payloads
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import EventParseError


class EventKind(str, Enum):
    """Supported ``GITHUB_EVENT_NAME`` values."""

    ISSUES = "issues"
    DISCUSSION = "discussion"
    PULL_REQUEST = "pull_request"
    PULL_REQUEST_TARGET = "pull_request_target"

    @property
    def payload_key(self) -> str:
        """Top-level key of the event JSON holding the subject."""
        return _PAYLOAD_KEYS[self]

    @property
    def subject_name(self) -> str:
        """Human-readable name of the subject, used in comments."""
        return _SUBJECT_NAMES[self]

    @classmethod
    def parse(cls, event_name: str) -> "EventKind":
        try:
            return cls(event_name)
        except ValueError:
            raise EventParseError(f"invalid event name {event_name!r}") from None


_PAYLOAD_KEYS = {
    EventKind.ISSUES: "issue",
    EventKind.DISCUSSION: "discussion",
    EventKind.PULL_REQUEST: "pull_request",
    EventKind.PULL_REQUEST_TARGET: "pull_request",
}

_SUBJECT_NAMES = {
    EventKind.ISSUES: "issue",
    EventKind.DISCUSSION: "discussion",
    EventKind.PULL_REQUEST: "pull request",
    EventKind.PULL_REQUEST_TARGET: "pull request",
}


class EventPayload(BaseModel):
    """The labelable item an event is about."""

    model_config = ConfigDict(frozen=True)

    node_id: str = Field(..., description="GraphQL node ID of the item")
    title: str = Field(..., description="Title of the item")
    body: str = Field("", description="Markdown body, empty when absent")

    @field_validator("body", mode="before")
    @classmethod
    def null_body_to_empty(cls, v: str | None) -> str:
        return v or ""

    def __str__(self) -> str:
        return f"Title: {self.title}\nBody: {self.body}"


class IssuesEvent(BaseModel):
    issue: EventPayload


class DiscussionEvent(BaseModel):
    discussion: EventPayload


class PullRequestEvent(BaseModel):
    pull_request: EventPayload


EVENT_MODELS: dict[EventKind, type[BaseModel]] = {
    EventKind.ISSUES: IssuesEvent,
    EventKind.DISCUSSION: DiscussionEvent,
    EventKind.PULL_REQUEST: PullRequestEvent,
    EventKind.PULL_REQUEST_TARGET: PullRequestEvent,
}


def payload_from_event(event_name: str | EventKind, event: Any) -> EventPayload:
    """Extract the labelable subject from a decoded event.

    Args:
        event_name: Event kind, as in ``GITHUB_EVENT_NAME``
        event: Decoded event JSON

    Returns:
        The subject payload

    Raises:
        EventParseError: Unknown event kind, missing key or wrong shape
    """
    kind = EventKind.parse(event_name)

    if not isinstance(event, dict):
        raise EventParseError(f"failed to decode {kind.value} event: not an object")
    if kind.payload_key not in event:
        raise EventParseError(
            f"invalid event: {kind.value} event has no {kind.payload_key!r} key"
        )

    try:
        parsed = EVENT_MODELS[kind].model_validate(event)
    except ValidationError as e:
        raise EventParseError(f"invalid {kind.value} event: {e}") from e

    payload: EventPayload = getattr(parsed, kind.payload_key)
    return payload


def load_event(event_name: str | EventKind, path: str | Path) -> EventPayload:
    """Read an event file and extract its subject."""
    kind = EventKind.parse(event_name)
    try:
        with open(path, encoding="utf-8") as f:
            event = json.load(f)
    except OSError as e:
        raise EventParseError(f"failed to open event file: {e}") from e
    except ValueError as e:
        raise EventParseError(f"failed to decode {kind.value} event: {e}") from e

    return payload_from_event(kind, event)
