"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .label import label

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="auto-label",
    help="Label GitHub issues, discussions and pull requests with ChatGPT",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="run", context_settings={"help_option_names": ["-h", "--help"]})(
    label
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from auto_labeler import __version__

    console.print(f"Auto Labeler v{__version__}")


if __name__ == "__main__":
    app()
