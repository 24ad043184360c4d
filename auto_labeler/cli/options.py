"""Standardized CLI option definitions."""

import typer

from ..ai.labeler import DEFAULT_MODEL
from ..config import DEFAULT_TIMEOUT_SECONDS

TIMEOUT_OPTION = typer.Option(
    DEFAULT_TIMEOUT_SECONDS,
    "--timeout",
    "-t",
    min=1,
    help="Timeout in seconds for the whole run",
)

MODEL_OPTION = typer.Option(
    DEFAULT_MODEL,
    "--model",
    "--gpt-model",
    "-m",
    help="Chat completion model used (e.g., 'gpt-4o-mini')",
)

DETAILS_OPTION = typer.Option(
    "",
    "--details",
    "-d",
    help="Additional details for label suggestions",
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Enable debug logging"
)
