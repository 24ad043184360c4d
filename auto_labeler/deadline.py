"""Single timeout budget shared by every network call of a run."""

import time
from collections.abc import Iterable

from .errors import TransportError


class Deadline:
    """Tracks the time left until a fixed point in the future.

    One deadline is created when a run starts and handed to each external
    call, so the last call only gets whatever time the earlier ones left.
    Response bodies are read through ``collect`` so a server trickling bytes
    cannot hold a call past the deadline.
    """

    def __init__(self, seconds: float):
        self.seconds = seconds
        self._expires_at = time.monotonic() + seconds

    def remaining(self) -> float:
        """Return the seconds left, raising once the budget is spent."""
        left = self._expires_at - time.monotonic()
        if left <= 0:
            raise TransportError(f"deadline of {self.seconds}s exceeded")
        return left

    def collect(self, chunks: Iterable[bytes]) -> bytes:
        """Join a streamed response body, raising if the deadline passes."""
        body = bytearray()
        for chunk in chunks:
            self.remaining()
            body.extend(chunk)
        self.remaining()
        return bytes(body)
