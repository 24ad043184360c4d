"""Error types raised by the labeling pipeline.

Every failure the pipeline can hit is a subclass of ``AutoLabelerError`` so the
CLI can report it uniformly. ``EmptyResponse`` is the one condition the
pipeline recovers from: it means the model had nothing to say and the run ends
without touching the item.
"""

import json
from typing import Any


class AutoLabelerError(Exception):
    """Base exception for all auto-labeler errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def add_context(self, context: str) -> "AutoLabelerError":
        """Prefix the message with the operation that failed and return self."""
        self.message = f"{context}: {self.message}"
        self.args = (self.message,)
        return self


class ConfigError(AutoLabelerError):
    """Raised when process configuration is missing or invalid."""


class TransportError(AutoLabelerError):
    """Raised when a request could not be delivered (connection, timeout)."""


class HTTPStatusError(AutoLabelerError):
    """Raised when a service answers with a non-success status code.

    Attributes:
        status_code: HTTP status code from the response.
        body: Raw response body.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"status code: {status_code}, body: {body}")


class GraphQLError(AutoLabelerError):
    """Raised when the GraphQL envelope carries a non-empty ``errors`` array.

    Attributes:
        errors: The error entries exactly as returned by the API.
    """

    def __init__(self, errors: list[Any]):
        self.errors = errors
        self.messages = [
            entry.get("message", "") if isinstance(entry, dict) else str(entry)
            for entry in errors
        ]
        super().__init__(f"bad request: {format_graphql_errors(errors)}")


class DecodeError(AutoLabelerError):
    """Raised when a response does not have the expected shape."""


class ResponseParseError(DecodeError):
    """Raised when the model reply is not a valid label selection."""


class EmptyResponse(AutoLabelerError):
    """The model returned an empty message; no labeling action is possible."""

    def __init__(self, message: str = "empty message"):
        super().__init__(message)


class EventParseError(AutoLabelerError):
    """Raised when the event payload is malformed or of an unknown kind."""


def format_graphql_errors(errors: list[Any]) -> str:
    """Join the compact JSON form of each GraphQL error entry with commas."""
    return ",".join(
        json.dumps(entry, separators=(",", ":"), ensure_ascii=False) for entry in errors
    )
