"""Record commands: show."""

from pathlib import Path

import structlog
import typer

from toss_vault.cli._common import (
    DATA_DIR_OPTION,
    FORMAT_OPTION,
    GAME_TYPE_OPTION,
    SEASON_END_OPTION,
    SEASON_START_OPTION,
    SEASON_WINDOW_OPTION,
    STRICT_OPTION,
    check_format,
    echo_json,
    load_filtered,
)
from toss_vault.engine.records import calculate_all_records
from toss_vault.models.records import (
    ConversionRecord,
    HeadToHeadRecord,
    PercentageRecord,
    Record,
    RivalryRecord,
    SeasonRecord,
    StreakRecord,
)
from toss_vault.utils.config import get_settings

records_app = typer.Typer(help="League-wide toss records.")

logger = structlog.get_logger(__name__)


def _describe(record: Record) -> list[str]:
    """Headline plus one line per holder."""
    if not record.holders:
        return [f"{record.name}: no qualifying team"]

    if isinstance(record, StreakRecord):
        lines = [f"{record.name}: {record.streak}"]
        for e in record.entries:
            span = f" ({e.start_date} - {e.end_date})" if e.start_date else ""
            lines.append(f"  {e.team}{span}")
    elif isinstance(record, PercentageRecord):
        lines = [f"{record.name}: {record.percentage}%"]
        lines += [f"  {e.team} ({e.wins}/{e.total})" for e in record.entries]
    elif isinstance(record, ConversionRecord):
        lines = [f"{record.name}: {record.percentage}%"]
        lines += [f"  {e.team} ({e.game_wins}/{e.toss_wins} games won)" for e in record.entries]
    elif isinstance(record, RivalryRecord):
        lines = [f"{record.name}: {record.percentage}%"]
        lines += [f"  {e.team} vs {e.opponent} ({e.wins}-{e.losses})" for e in record.entries]
    elif isinstance(record, HeadToHeadRecord):
        lines = [f"{record.name}: {record.streak}"]
        lines += [f"  {e.team} vs {e.opponent}" for e in record.entries]
    elif isinstance(record, SeasonRecord):
        lines = [f"{record.name}: {record.percentage}%"]
        lines += [f"  {e.team} {e.season} ({e.wins}-{e.losses})" for e in record.entries]
    else:
        lines = [record.name]
    return lines


@records_app.command()
def show(
    data_dir: Path | None = DATA_DIR_OPTION,
    season_window: str = SEASON_WINDOW_OPTION,
    season_start: int | None = SEASON_START_OPTION,
    season_end: int | None = SEASON_END_OPTION,
    game_type: list[str] | None = GAME_TYPE_OPTION,
    strict: bool = STRICT_OPTION,
    output_format: str = FORMAT_OPTION,
) -> None:
    """
    Show the league record book.

    Ties list every co-holder. Minimum samples come from settings
    (TOSS_VAULT_MIN_TOSSES_FOR_PCT and friends).
    """
    check_format(output_format)
    dataset = load_filtered(data_dir, season_window, season_start, season_end, game_type, strict)
    book = calculate_all_records(
        dataset.tosses,
        dataset.game_for,
        dataset.team_for,
        thresholds=get_settings().record_thresholds(),
        placeholders=get_settings().placeholder_teams,
    )
    logger.info("Computed record book", tosses=len(dataset.tosses))

    if output_format == "json":
        echo_json(book)
        return

    for record in book.as_list():
        for line in _describe(record):
            typer.echo(line)
