"""Per-team toss aggregation.

Two counting rules apply and are kept apart:

- toss counts, toss win %, defer % and game conversion use Regular tosses
  only, so a game that went to overtime is one toss for these numbers;
- the current streak counts Regular and Overtime tosses as separate events.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

import structlog

from toss_vault.engine.common import PLACEHOLDER_TEAMS, is_placeholder, percentage
from toss_vault.engine.lookup import GameFor
from toss_vault.engine.ordering import sort_tosses
from toss_vault.engine.streaks import current_streak
from toss_vault.models.game import Game, GameKey
from toss_vault.models.stats import GameLogEntry, GameRecordLine, GameRecordSummary, TeamStat
from toss_vault.models.toss import Toss

logger = structlog.get_logger(__name__)


def group_by_team(
    tosses: Iterable[Toss], placeholders: Iterable[str] = PLACEHOLDER_TEAMS
) -> dict[str, list[Toss]]:
    """
    Canonically ordered toss history per participating team.

    Placeholder identifiers (e.g. ``"Unknown"``) get no bucket. Keys are
    returned in abbreviation order.
    """
    placeholders = frozenset(placeholders)
    history: dict[str, list[Toss]] = defaultdict(list)
    skipped = 0
    for toss in sort_tosses(tosses):
        for team in (toss.winner, toss.loser):
            if is_placeholder(team, placeholders):
                skipped += 1
                continue
            history[team].append(toss)
    if skipped:
        logger.debug("Skipped placeholder team entries", count=skipped)
    return {team: history[team] for team in sorted(history)}


def _team_stat(team: str, events: Sequence[Toss], game_for: GameFor) -> TeamStat:
    total = wins = defers = games_with_data = game_wins = 0
    for toss in events:
        if toss.is_overtime:
            continue
        total += 1
        if toss.winner != team:
            continue
        wins += 1
        if toss.winner_choice == "Defer":
            defers += 1
        game = game_for(toss)
        if game is not None and game.has_result:
            games_with_data += 1
            if game.winner == team:
                game_wins += 1

    return TeamStat(
        abbr=team,
        total_tosses=total,
        toss_wins=wins,
        toss_win_pct=percentage(wins, total),
        game_win_pct=percentage(game_wins, games_with_data),
        defer_pct=percentage(defers, wins),
        current_streak=current_streak(events, team),
    )


def calculate_team_stats(
    tosses: Iterable[Toss],
    game_for: GameFor,
    placeholders: Iterable[str] = PLACEHOLDER_TEAMS,
) -> list[TeamStat]:
    """
    Compute a TeamStat for every team appearing in ``tosses``.

    Args:
        tosses: Toss events in any order; not modified.
        game_for: Resolves a toss to its game, or None.
        placeholders: Team identifiers to leave out.

    Returns:
        One TeamStat per team, sorted by abbreviation.
    """
    history = group_by_team(tosses, placeholders)
    stats = [_team_stat(team, events, game_for) for team, events in history.items()]
    logger.debug("Calculated team stats", teams=len(stats))
    return stats


def team_stat(tosses: Iterable[Toss], team: str, game_for: GameFor) -> TeamStat:
    """TeamStat for one team; a team without tosses gets an all-zero stat."""
    events = sort_tosses(toss for toss in tosses if toss.involves(team))
    return _team_stat(team, events, game_for)


def _tally(line: GameRecordLine, outcome: str) -> GameRecordLine:
    if outcome == "won":
        return line.model_copy(update={"wins": line.wins + 1})
    if outcome == "lost":
        return line.model_copy(update={"losses": line.losses + 1})
    return line.model_copy(update={"ties": line.ties + 1})


def game_record(tosses: Iterable[Toss], team: str, game_for: GameFor) -> GameRecordSummary:
    """
    Actual W-L-T record of ``team`` over the games behind ``tosses``.

    Each game counts once even when it has a Regular and an Overtime toss;
    games without both scores are left out.
    """
    seen: set[GameKey] = set()
    overall = home = away = GameRecordLine()
    for toss in tosses:
        if not toss.involves(team):
            continue
        game = game_for(toss)
        if game is None or game.key in seen:
            continue
        outcome = game.outcome_for(team)
        if outcome is None:
            continue
        seen.add(game.key)
        overall = _tally(overall, outcome)
        if game.home_team == team:
            home = _tally(home, outcome)
        else:
            away = _tally(away, outcome)
    return GameRecordSummary(team=team, overall=overall, home=home, away=away)


def game_log(
    tosses: Iterable[Toss], team: str, game_for: GameFor | None = None
) -> list[GameLogEntry]:
    """
    One entry per game for ``team``, oldest first.

    Tosses are grouped by date, season, week and team pair; an entry holds
    the game's Regular toss and its Overtime toss when there was one.
    """
    grouped: dict[tuple, dict[str, Toss]] = {}
    for toss in sort_tosses(toss for toss in tosses if toss.involves(team)):
        key = (toss.game_date, toss.season, toss.week, toss.teams)
        slot = grouped.setdefault(key, {})
        slot.setdefault(toss.toss_type, toss)

    entries: list[GameLogEntry] = []
    for slot in grouped.values():
        first = slot.get("Regular") or slot["Overtime"]
        game: Game | None = game_for(first) if game_for is not None else None
        entries.append(
            GameLogEntry(
                season=first.season,
                week=first.week,
                game_date=first.game_date,
                opponent=first.opponent_of(team),
                regular_toss=slot.get("Regular"),
                overtime_toss=slot.get("Overtime"),
                game=game,
            )
        )
    return entries
