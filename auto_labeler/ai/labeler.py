"""Label selection with an OpenAI chat completion model."""

import logging

import httpx
import openai
from openai import OpenAI
from openai.types.chat import ChatCompletion
from pydantic import BaseModel, Field, ValidationError

from ..deadline import Deadline
from ..errors import (
    DecodeError,
    EmptyResponse,
    HTTPStatusError,
    ResponseParseError,
    TransportError,
)
from .models import LabelSelection
from .prompts import build_system_prompt

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-3.5-turbo"


class LabelsRequest(BaseModel):
    """Input of a single labeling call."""

    payload: str = Field(description="Event text, 'Title: ...\\nBody: ...'")
    labels: str = Field(description="Available labels serialised as JSON")
    details: str = Field(default="", description="Optional operator guidance")
    subject: str = Field(default="item", description="Kind of item being labeled")


def build_messages(request: LabelsRequest) -> list[dict[str, str]]:
    """Build the two chat messages sent to the model."""
    return [
        {
            "role": "system",
            "content": build_system_prompt(
                request.labels, request.details, request.subject
            ),
        },
        {"role": "user", "content": request.payload},
    ]


class LabelingAssistant:
    """Asks a chat completion model which labels fit an item."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the assistant.

        Args:
            api_key: OpenAI API key
            model: Chat completion model name (e.g., 'gpt-4o-mini')
            base_url: Optional API base URL override
            http_client: Optional httpx client handed to the OpenAI SDK
        """
        self.model = model
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            http_client=http_client,
            max_retries=0,
        )

    def get_labels(
        self, request: LabelsRequest, deadline: Deadline | None = None
    ) -> LabelSelection:
        """Ask the model to pick labels for an item.

        Args:
            request: Event text, available labels and guidance
            deadline: Run deadline bounding the request and the read of the
                completion body

        Returns:
            The parsed label selection

        Raises:
            EmptyResponse: The model replied with an empty message
            ResponseParseError: The reply is not a valid selection
            DecodeError: The API answered with something other than a completion
            HTTPStatusError: The API answered with an error status
            TransportError: The API could not be reached in time
        """
        timeout = deadline.remaining() if deadline is not None else None
        try:
            with self.client.chat.completions.with_streaming_response.create(
                model=self.model,
                messages=build_messages(request),  # type: ignore[arg-type]
                timeout=timeout,
            ) as response:
                if deadline is not None:
                    body = deadline.collect(response.iter_bytes())
                else:
                    body = response.read()
        except openai.APIStatusError as e:
            raise HTTPStatusError(e.status_code, e.response.text) from e
        except openai.APIConnectionError as e:
            raise TransportError(f"failed to create completion: {e}") from e
        except httpx.TransportError as e:
            raise TransportError(f"failed to create completion: {e}") from e
        except openai.APIError as e:
            raise DecodeError(f"failed to create completion: {e}") from e

        try:
            completion = ChatCompletion.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"failed to create completion: {e}") from e

        if not completion.choices:
            raise DecodeError("failed to create completion: no choices returned")

        message = completion.choices[0].message.content or ""
        logger.debug("Model reply: %s", message)
        if not message.strip():
            raise EmptyResponse()

        try:
            return LabelSelection.model_validate_json(message)
        except ValidationError as e:
            raise ResponseParseError(f"failed to unmarshal message: {e}") from e

    def close(self) -> None:
        self.client.close()
