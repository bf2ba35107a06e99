"""Shared CLI plumbing: data loading, filter options, and output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pydantic
import structlog
import typer

from toss_vault.engine.filters import TossFilter
from toss_vault.exceptions import TossVaultError
from toss_vault.ingestion.files import TossDataset, load_dataset
from toss_vault.models.toss import normalize_game_type
from toss_vault.utils.config import get_settings

logger = structlog.get_logger(__name__)

DATA_DIR_OPTION = typer.Option(
    None,
    "--data-dir",
    "-d",
    help="Directory with tosses/games/teams .csv or .json files (default: settings)",
)
SEASON_WINDOW_OPTION = typer.Option(
    "all", "--season-window", "-w", help="all, last1, last5, last10, or custom"
)
SEASON_START_OPTION = typer.Option(None, "--season-start", help="First season (custom window)")
SEASON_END_OPTION = typer.Option(None, "--season-end", help="Last season (custom window)")
GAME_TYPE_OPTION = typer.Option(
    None, "--game-type", "-g", help="Preseason, Regular Season, or Postseason (repeatable)"
)
STRICT_OPTION = typer.Option(False, "--strict", help="Fail on the first invalid row")
FORMAT_OPTION = typer.Option("table", "--format", "-f", help="Output format: table or json")


def fail(message: str, error: Exception | None = None) -> typer.Exit:
    """Log and print a failure line; return the Exit to raise."""
    logger.error(message, error=str(error) if error else None)
    typer.echo(f"[FAIL] {message}" + (f": {error}" if error else ""), err=True)
    return typer.Exit(code=1)


def load_filtered(
    data_dir: Path | None,
    season_window: str,
    season_start: int | None,
    season_end: int | None,
    game_types: list[str] | None,
    strict: bool,
) -> TossDataset:
    """Load the dataset and apply the season/game-type filter to its tosses."""
    path = data_dir or Path(get_settings().data_dir)
    try:
        toss_filter = TossFilter(
            season_window=season_window,  # type: ignore[arg-type]
            season_start=season_start,
            season_end=season_end,
            game_types=tuple(normalize_game_type(t) for t in game_types or ()),
        )
        dataset = load_dataset(path, strict=strict)
    except (TossVaultError, pydantic.ValidationError) as e:
        raise fail("Could not load toss data", e) from e

    if toss_filter.is_noop:
        return dataset
    filtered = toss_filter.apply(dataset.tosses)
    logger.info("Applied toss filter", kept=len(filtered), total=len(dataset.tosses))
    return TossDataset(tosses=filtered, games=dataset.games, teams=dataset.teams)


def check_format(output_format: str) -> None:
    if output_format not in {"table", "json"}:
        raise fail(f"Unknown output format '{output_format}'")


def echo_json(payload: Any) -> None:
    """Print models (or lists of models) as indented JSON."""
    if isinstance(payload, pydantic.BaseModel):
        payload = payload.model_dump(mode="json")
    elif isinstance(payload, list):
        payload = [
            item.model_dump(mode="json") if isinstance(item, pydantic.BaseModel) else item
            for item in payload
        ]
    typer.echo(json.dumps(payload, indent=2))


def format_streak(streak: int) -> str:
    """W3 / L2 style streak label; "-" when there is no streak."""
    if streak > 0:
        return f"W{streak}"
    if streak < 0:
        return f"L{-streak}"
    return "-"
