"""Minimal GitHub GraphQL transport over httpx.

Queries are sent as fully-formed strings; there is no separate variables
channel, so every value interpolated into a query must go through
``graphql_string`` first.
"""

import json
import logging
from typing import Any

import httpx

from ..deadline import Deadline
from ..errors import DecodeError, GraphQLError, HTTPStatusError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"


def graphql_string(value: str) -> str:
    """Render ``value`` as a quoted GraphQL string literal.

    GraphQL string literals share JSON's escape sequences, so quotes,
    backslashes and control characters are escaped the same way.
    """
    return json.dumps(value, ensure_ascii=False)


class GraphQLTransport:
    """Sends authenticated GraphQL requests to a single endpoint."""

    def __init__(
        self,
        token: str,
        endpoint: str = DEFAULT_GRAPHQL_URL,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the transport.

        Args:
            token: GitHub token sent as a bearer credential
            endpoint: GraphQL endpoint URL
            http_client: Optional preconfigured httpx client (tests pass one
                backed by ``httpx.MockTransport``)
        """
        self.endpoint = endpoint
        self.headers = {
            "Authorization": f"bearer {token}",
            "Content-Type": "application/json",
        }
        self._owns_client = http_client is None
        self.client = http_client or httpx.Client()

    def execute(self, query: str, deadline: Deadline | None = None) -> Any:
        """Run a query or mutation and return the ``data`` member.

        Args:
            query: Complete GraphQL document
            deadline: Run deadline; bounds both the request and reading
                the response body

        Returns:
            The undecoded ``data`` value of the response envelope

        Raises:
            TransportError: The request could not be completed in time
            HTTPStatusError: The endpoint answered with a non-2xx status
            DecodeError: The response body is not a GraphQL envelope
            GraphQLError: The envelope contains errors
        """
        timeout = deadline.remaining() if deadline is not None else None
        try:
            with self.client.stream(
                "POST",
                self.endpoint,
                headers=self.headers,
                content=json.dumps({"query": query}),
                timeout=timeout,
            ) as response:
                if deadline is not None:
                    content = deadline.collect(response.iter_bytes())
                else:
                    content = response.read()
        except httpx.TransportError as e:
            raise TransportError(f"request to {self.endpoint} failed: {e}") from e

        if not response.is_success:
            raise HTTPStatusError(
                response.status_code, content.decode("utf-8", errors="replace")
            )

        try:
            envelope = json.loads(content)
        except ValueError as e:
            raise DecodeError(f"failed to decode response: {e}") from e

        if not isinstance(envelope, dict):
            raise DecodeError(
                f"failed to decode response: expected an object, got {envelope!r}"
            )

        errors = envelope.get("errors") or []
        if not isinstance(errors, list):
            raise DecodeError(
                f"failed to decode response: errors is not a list: {errors!r}"
            )
        if errors:
            logger.debug("GraphQL errors: %s", errors)
            raise GraphQLError(errors)

        return envelope.get("data")

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "GraphQLTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
