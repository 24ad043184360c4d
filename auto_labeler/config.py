"""Run configuration for the auto-labeler."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ai.comment_generator import DEFAULT_SERVER_URL
from .ai.labeler import DEFAULT_MODEL
from .errors import ConfigError
from .github_client.graphql import DEFAULT_GRAPHQL_URL

DEFAULT_TIMEOUT_SECONDS = 60

REQUIRED_ENV_VARS = (
    "GITHUB_REPOSITORY",
    "GITHUB_EVENT_NAME",
    "GITHUB_EVENT_PATH",
    "OPENAI_API_KEY",
    "GITHUB_TOKEN",
    "GITHUB_GRAPHQL_URL",
)


class RunConfig(BaseModel):
    """Everything a labeling run needs, built once at process start."""

    model_config = ConfigDict(frozen=True)

    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="Run timeout (seconds)"
    )
    model: str = Field(default=DEFAULT_MODEL, description="Chat completion model")
    repo_owner: str
    repo_name: str
    event_name: str = Field(description="GITHUB_EVENT_NAME of the triggering event")
    event_path: str = Field(description="Path to the event payload JSON file")
    details: str = Field(default="", description="Extra guidance for the model")
    openai_api_key: str = Field(repr=False)
    github_token: str = Field(repr=False)
    graphql_url: str = DEFAULT_GRAPHQL_URL
    server_url: str = DEFAULT_SERVER_URL
    openai_base_url: str | None = None

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        model: str = DEFAULT_MODEL,
        details: str = "",
        environ: Mapping[str, str] | None = None,
    ) -> "RunConfig":
        """Build the configuration from the GitHub Actions environment.

        Args:
            timeout: Run timeout in seconds
            model: Chat completion model name
            details: Extra guidance for the model
            environ: Environment to read; defaults to ``os.environ``

        Raises:
            ConfigError: A required variable is missing or malformed
        """
        env = os.environ if environ is None else environ

        missing = [key for key in REQUIRED_ENV_VARS if not env.get(key)]
        if missing:
            raise ConfigError(
                f"Environment variables required: {', '.join(missing)}"
            )

        owner, _, name = env["GITHUB_REPOSITORY"].partition("/")
        if not owner or not name or "/" in name:
            raise ConfigError(
                f"GITHUB_REPOSITORY must look like 'owner/name', "
                f"got {env['GITHUB_REPOSITORY']!r}"
            )

        try:
            return cls(
                timeout=timeout,
                model=model,
                repo_owner=owner,
                repo_name=name,
                event_name=env["GITHUB_EVENT_NAME"],
                event_path=env["GITHUB_EVENT_PATH"],
                details=details,
                openai_api_key=env["OPENAI_API_KEY"],
                github_token=env["GITHUB_TOKEN"],
                graphql_url=env["GITHUB_GRAPHQL_URL"],
                server_url=env.get("GITHUB_SERVER_URL") or DEFAULT_SERVER_URL,
                openai_base_url=env.get("OPENAI_BASE_URL") or None,
            )
        except ValidationError as e:
            raise ConfigError(f"invalid configuration: {e}") from e
