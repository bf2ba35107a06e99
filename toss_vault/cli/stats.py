"""Statistics commands: teams, team, opponents, matchup, league, showdown."""

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
    fail,
    format_streak,
    load_filtered,
)
from toss_vault.engine.league import league_summary, streak_showdown
from toss_vault.engine.opponents import calculate_opponent_stats_for_team, head_to_head
from toss_vault.engine.ordering import event_label
from toss_vault.engine.teams import calculate_team_stats, game_record, team_stat
from toss_vault.utils.config import get_settings

stats_app = typer.Typer(help="Team, opponent, and league toss statistics.")

logger = structlog.get_logger(__name__)


@stats_app.command()
def teams(
    data_dir: Path | None = DATA_DIR_OPTION,
    season_window: str = SEASON_WINDOW_OPTION,
    season_start: int | None = SEASON_START_OPTION,
    season_end: int | None = SEASON_END_OPTION,
    game_type: list[str] | None = GAME_TYPE_OPTION,
    strict: bool = STRICT_OPTION,
    output_format: str = FORMAT_OPTION,
) -> None:
    """
    Toss statistics for every team.

    Toss counts, win %, defer % and game conversion use Regular tosses only;
    the streak counts Overtime tosses too.
    """
    check_format(output_format)
    dataset = load_filtered(data_dir, season_window, season_start, season_end, game_type, strict)
    stats = calculate_team_stats(
        dataset.tosses, dataset.game_for, placeholders=get_settings().placeholder_teams
    )
    logger.info("Computed team stats", teams=len(stats))

    if output_format == "json":
        echo_json(stats)
        return

    typer.echo(
        f"{'TEAM':<6}{'TOSSES':>8}{'WINS':>6}{'WIN%':>6}"
        f"{'GAME%':>7}{'DEFER%':>8}{'STREAK':>8}"
    )
    for s in stats:
        typer.echo(
            f"{s.abbr:<6}{s.total_tosses:>8}{s.toss_wins:>6}{s.toss_win_pct:>6}"
            f"{s.game_win_pct:>7}{s.defer_pct:>8}{format_streak(s.current_streak):>8}"
        )


@stats_app.command()
def team(
    abbreviation: str = typer.Argument(..., help="Team abbreviation"),
    data_dir: Path | None = DATA_DIR_OPTION,
    season_window: str = SEASON_WINDOW_OPTION,
    season_start: int | None = SEASON_START_OPTION,
    season_end: int | None = SEASON_END_OPTION,
    game_type: list[str] | None = GAME_TYPE_OPTION,
    strict: bool = STRICT_OPTION,
    output_format: str = FORMAT_OPTION,
) -> None:
    """Toss statistics and actual W-L-T game record for one team."""
    check_format(output_format)
    dataset = load_filtered(data_dir, season_window, season_start, season_end, game_type, strict)
    if not any(t.involves(abbreviation) for t in dataset.tosses):
        raise fail(f"No tosses found for team '{abbreviation}'")

    stat = team_stat(dataset.tosses, abbreviation, dataset.game_for)
    record = game_record(dataset.tosses, abbreviation, dataset.game_for)

    if output_format == "json":
        echo_json({"stat": stat.model_dump(mode="json"), "record": record.model_dump(mode="json")})
        return

    info = dataset.team_for(abbreviation)
    typer.echo(f"{abbreviation}" + (f" - {info.name}" if info else ""))
    typer.echo(f"  Tosses:       {stat.total_tosses} ({stat.toss_wins} won, {stat.toss_win_pct}%)")
    typer.echo(f"  Defer rate:   {stat.defer_pct}%")
    typer.echo(f"  Toss -> game: {stat.game_win_pct}%")
    typer.echo(f"  Streak:       {format_streak(stat.current_streak)}")
    for label, line in (("Overall", record.overall), ("Home", record.home), ("Away", record.away)):
        wlt = f"{line.wins}-{line.losses}-{line.ties}"
        typer.echo(f"  {label + ':':<13} {wlt} ({line.win_pct:.3f})")


@stats_app.command()
def opponents(
    abbreviation: str = typer.Argument(..., help="Team abbreviation"),
    data_dir: Path | None = DATA_DIR_OPTION,
    season_window: str = SEASON_WINDOW_OPTION,
    season_start: int | None = SEASON_START_OPTION,
    season_end: int | None = SEASON_END_OPTION,
    game_type: list[str] | None = GAME_TYPE_OPTION,
    strict: bool = STRICT_OPTION,
    output_format: str = FORMAT_OPTION,
) -> None:
    """How each opponent has fared against a team."""
    check_format(output_format)
    dataset = load_filtered(data_dir, season_window, season_start, season_end, game_type, strict)
    stats = calculate_opponent_stats_for_team(
        dataset.tosses,
        abbreviation,
        dataset.game_for,
        placeholders=get_settings().placeholder_teams,
    )

    if output_format == "json":
        echo_json(stats)
        return

    typer.echo(f"Opponents of {abbreviation} ({len(stats)})")
    typer.echo(f"{'OPP':<6}{'GAMES':>7}{'TOSSES':>8}{'WON':>5}{'WIN%':>6}{'GAME%':>7}{'STREAK':>8}")
    for s in stats:
        typer.echo(
            f"{s.abbr:<6}{s.total_matchups:>7}{s.total_tosses:>8}{s.toss_wins:>5}"
            f"{s.toss_win_pct:>6}{s.game_win_pct:>7}{format_streak(s.current_streak):>8}"
        )


@stats_app.command()
def matchup(
    team1: str = typer.Argument(..., help="First team abbreviation"),
    team2: str = typer.Argument(..., help="Second team abbreviation"),
    data_dir: Path | None = DATA_DIR_OPTION,
    season_window: str = SEASON_WINDOW_OPTION,
    season_start: int | None = SEASON_START_OPTION,
    season_end: int | None = SEASON_END_OPTION,
    game_type: list[str] | None = GAME_TYPE_OPTION,
    strict: bool = STRICT_OPTION,
    output_format: str = FORMAT_OPTION,
) -> None:
    """Head-to-head toss results between two teams, newest first."""
    check_format(output_format)
    if team1 == team2:
        raise fail("Pick two different teams")
    dataset = load_filtered(data_dir, season_window, season_start, season_end, game_type, strict)
    h2h = head_to_head(dataset.tosses, team1, team2)

    if output_format == "json":
        echo_json(h2h)
        return

    typer.echo(f"{team1} {h2h.team1_toss_wins} - {h2h.team2_toss_wins} {team2}")
    for toss in h2h.tosses:
        ot = " (OT)" if toss.is_overtime else ""
        typer.echo(f"  {event_label(toss):<12} {toss.winner} won{ot}")


@stats_app.command()
def league(
    data_dir: Path | None = DATA_DIR_OPTION,
    season_window: str = SEASON_WINDOW_OPTION,
    season_start: int | None = SEASON_START_OPTION,
    season_end: int | None = SEASON_END_OPTION,
    game_type: list[str] | None = GAME_TYPE_OPTION,
    strict: bool = STRICT_OPTION,
    output_format: str = FORMAT_OPTION,
) -> None:
    """League-wide key metrics."""
    check_format(output_format)
    dataset = load_filtered(data_dir, season_window, season_start, season_end, game_type, strict)
    summary = league_summary(dataset.tosses, dataset.game_for)

    if output_format == "json":
        echo_json(summary)
        return

    typer.echo(f"Tosses:               {summary.total_tosses} ({summary.overtime_tosses} overtime)")
    typer.echo(
        f"Toss winner won game: {summary.win_correlation_pct}% "
        f"of {summary.tosses_with_results} games"
    )
    typer.echo(f"Defer rate:           {summary.defer_rate_pct}%")


@stats_app.command()
def showdown(
    data_dir: Path | None = DATA_DIR_OPTION,
    season_window: str = SEASON_WINDOW_OPTION,
    season_start: int | None = SEASON_START_OPTION,
    season_end: int | None = SEASON_END_OPTION,
    game_type: list[str] | None = GAME_TYPE_OPTION,
    strict: bool = STRICT_OPTION,
    output_format: str = FORMAT_OPTION,
) -> None:
    """Longest toss win and loss streak per team."""
    check_format(output_format)
    dataset = load_filtered(data_dir, season_window, season_start, season_end, game_type, strict)
    rows = streak_showdown(dataset.tosses, dataset.teams)

    if output_format == "json":
        echo_json(rows)
        return

    if not rows:
        typer.echo("No streak data available for selected filters")
        return
    typer.echo(f"{'TEAM':<6}{'LONGEST W':>11}{'LONGEST L':>11}")
    for row in rows:
        typer.echo(f"{row.abbr:<6}{row.max_win:>11}{row.max_loss:>11}")
