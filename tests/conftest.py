"""Test configuration and fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from auto_labeler.ai.labeler import LabelingAssistant
from auto_labeler.config import RunConfig
from auto_labeler.github_client.client import GitHubClient
from auto_labeler.github_client.graphql import GraphQLTransport

GRAPHQL_URL = "https://api.github.test/graphql"
OPENAI_URL = "https://openai.test/v1"

GitHubClientFactory = Callable[..., tuple[GitHubClient, list[httpx.Request]]]

LABELS_RESPONSE = {
    "data": {
        "repository": {
            "labels": {
                "nodes": [
                    {
                        "id": "MDU6TGFiZWw1NTU0NDg4MA==",
                        "name": "bug",
                        "description": "Something isn't working",
                    },
                    {
                        "id": "MDU6TGFiZWw1NTU0NDg4MQ==",
                        "name": "enhancement",
                        "description": "New feature or request",
                    },
                    {
                        "id": "MDU6TGFiZWw1NTU0NDg4Mg==",
                        "name": "question",
                        "description": "Further information is requested",
                    },
                ]
            }
        }
    }
}


def _chat_completion(content: str | None) -> dict[str, Any]:
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }


def _fake_github_client(
    status_code: int, response: str | dict[str, Any]
) -> tuple[GitHubClient, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if isinstance(response, dict):
            return httpx.Response(status_code, json=response)
        return httpx.Response(status_code, text=response)

    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    transport = GraphQLTransport("token", GRAPHQL_URL, http_client=http_client)
    return GitHubClient(transport), requests


def _fake_assistant(
    handler: Callable[[httpx.Request], httpx.Response],
) -> LabelingAssistant:
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return LabelingAssistant(
        "key", "gpt-3.5-turbo", base_url=OPENAI_URL, http_client=http_client
    )


@pytest.fixture
def event_file(tmp_path: Path) -> Path:
    """Issue event payload written the way the Actions runner does."""
    path = tmp_path / "event.json"
    path.write_text(
        json.dumps(
            {
                "action": "opened",
                "issue": {
                    "title": "Crash on start",
                    "body": "The app crashes right after launch.",
                    "node_id": "I_kwDOJrb9oM5wK1Xa",
                },
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def run_config(event_file: Path) -> RunConfig:
    """Run configuration for an issue event in owner/repo."""
    return RunConfig(
        timeout=30,
        model="gpt-3.5-turbo",
        repo_owner="owner",
        repo_name="repo",
        event_name="issues",
        event_path=str(event_file),
        openai_api_key="key",
        github_token="token",
        graphql_url=GRAPHQL_URL,
    )


@pytest.fixture
def labels_response() -> dict[str, Any]:
    """Fetch-labels response with three labels."""
    return LABELS_RESPONSE


@pytest.fixture
def chat_completion() -> Callable[[str | None], dict[str, Any]]:
    """Factory for chat completion response bodies with a single choice."""
    return _chat_completion


@pytest.fixture
def github_client_factory() -> GitHubClientFactory:
    """Factory for GitHub clients answering every request the same way.

    The factory returns the client and the list the sent requests are
    recorded into.
    """
    return _fake_github_client


@pytest.fixture
def assistant_factory() -> Callable[..., LabelingAssistant]:
    """Factory for labeling assistants whose OpenAI calls go to a handler."""
    return _fake_assistant
