"""CLI command labeling the item that triggered a GitHub Actions run."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..config import RunConfig
from ..errors import AutoLabelerError
from ..pipeline import RunOutcome, run
from .options import DETAILS_OPTION, MODEL_OPTION, TIMEOUT_OPTION, VERBOSE_OPTION

console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    # Quiet per-request logs unless debugging.
    http_level = logging.DEBUG if verbose else logging.WARNING
    for name in ("httpx", "httpcore", "openai"):
        logging.getLogger(name).setLevel(http_level)


def label(
    timeout: int = TIMEOUT_OPTION,
    model: str = MODEL_OPTION,
    details: str = DETAILS_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Label the issue, discussion or pull request that triggered this run.

    Reads the GitHub Actions environment (GITHUB_REPOSITORY, GITHUB_EVENT_NAME,
    GITHUB_EVENT_PATH, GITHUB_TOKEN, GITHUB_GRAPHQL_URL) and OPENAI_API_KEY,
    asks the model which repository labels apply, applies them and posts a
    comment explaining the choice.

    Examples:
        # Label with the default model
        auto-label run

        # Steer the model with extra guidance
        auto-label run --model gpt-4o-mini \
            --details "Use 'question' only for usage questions"
    """
    configure_logging(verbose)

    try:
        config = RunConfig.from_env(timeout=timeout, model=model, details=details)
        outcome = run(config)
    except AutoLabelerError as e:
        console.print(f"❌ [red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if outcome is RunOutcome.NO_OP:
        console.print("⚠️  [yellow]No labels were applied[/yellow]")
    else:
        console.print("✅ [green]Labels applied and comment posted[/green]")
