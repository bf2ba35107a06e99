"""Command-line interface for Toss Vault."""

import typer

from toss_vault.utils.config import ensure_directories
from toss_vault.utils.logging import setup_logging

from .records import records_app
from .stats import stats_app

app = typer.Typer(
    name="toss-vault",
    help="Toss Vault - coin toss statistics and records",
    add_completion=False,
)

app.add_typer(stats_app, name="stats")
app.add_typer(records_app, name="records")


@app.callback()
def _configure() -> None:
    # Runs before every subcommand.
    ensure_directories()
    setup_logging()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
