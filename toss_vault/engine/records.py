"""League-wide record extraction.

Every record follows the same holder policy: a strictly better value
replaces the holders with the new team alone, and an exactly equal value
adds the team alongside the current holders. Teams are visited in
abbreviation order, so holder order is reproducible.

Minimum-sample floors are hard cutoffs: a team (or pair, or season) below
the floor never competes for that record. Active streak records skip teams
flagged ``defunct``.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar

import structlog

from toss_vault.engine.common import PLACEHOLDER_TEAMS, is_placeholder, percentage
from toss_vault.engine.lookup import GameFor, TeamFor, no_teams
from toss_vault.engine.streaks import Run, active_run, longest_run, lost_by, won_by
from toss_vault.engine.teams import group_by_team
from toss_vault.models.records import (
    BreakdownRow,
    ConversionEntry,
    ConversionRecord,
    HeadToHeadEntry,
    HeadToHeadRecord,
    PercentageEntry,
    PercentageRecord,
    RecordBook,
    RecordThresholds,
    RivalryEntry,
    RivalryRecord,
    SeasonEntry,
    SeasonRecord,
    StreakEntry,
    StreakRecord,
)
from toss_vault.models.toss import Toss

logger = structlog.get_logger(__name__)

E = TypeVar("E")


class RecordHolders(Generic[E]):
    """
    Best value seen so far plus every entry tied with it.

    Args:
        lower_is_better: Keep the minimum instead of the maximum.
    """

    def __init__(self, lower_is_better: bool = False):
        self.lower_is_better = lower_is_better
        self.best: int | None = None
        self.entries: list[E] = []

    def _beats(self, value: int) -> bool:
        if self.best is None:
            return True
        return value < self.best if self.lower_is_better else value > self.best

    def offer(self, value: int, entry: E) -> None:
        if self._beats(value):
            self.best = value
            self.entries = [entry]
        elif value == self.best:
            self.entries.append(entry)


def _streak_entry(team: str, run: Run) -> StreakEntry:
    return StreakEntry(
        team=team, tosses=run.tosses, start_date=run.start_label, end_date=run.end_label
    )


def _streak_record(name: str, holders: RecordHolders[StreakEntry]) -> StreakRecord:
    return StreakRecord(name=name, streak=holders.best or 0, entries=tuple(holders.entries))


def _by_year(team: str, events: Sequence[Toss], limit: int) -> tuple[BreakdownRow, ...]:
    seasons: dict[int, list[int]] = defaultdict(lambda: [0, 0])
    for toss in events:
        tally = seasons[toss.season]
        tally[1] += 1
        if toss.winner == team:
            tally[0] += 1
    rows = []
    for season in sorted(seasons, reverse=True)[:limit]:
        wins, total = seasons[season]
        rows.append(
            BreakdownRow(
                label=f"{season}: {wins}-{total - wins}", value=f"{percentage(wins, total)}%"
            )
        )
    return tuple(rows)


def _by_opponent(
    team: str, qualifying: Sequence[Toss], game_for: GameFor, thresholds: RecordThresholds
) -> tuple[BreakdownRow, ...]:
    opponents: dict[str, list[int]] = defaultdict(lambda: [0, 0])
    for toss in qualifying:
        tally = opponents[toss.loser]
        tally[0] += 1
        game = game_for(toss)
        if game is not None and game.winner == team:
            tally[1] += 1

    eligible = [
        opp for opp, (toss_wins, _) in opponents.items()
        if toss_wins >= thresholds.min_opponent_breakdown_tosses
    ]
    eligible.sort(key=lambda opp: (-opponents[opp][1] / opponents[opp][0], opp))
    rows = []
    for opp in eligible[: thresholds.breakdown_limit]:
        toss_wins, game_wins = opponents[opp]
        rows.append(
            BreakdownRow(
                label=f"vs {opp}: {game_wins}/{toss_wins} games won",
                value=f"{percentage(game_wins, toss_wins)}%",
            )
        )
    return tuple(rows)


def _split_by_opponent(
    team: str, events: Sequence[Toss], placeholders: frozenset[str]
) -> dict[str, list[Toss]]:
    opponents: dict[str, list[Toss]] = defaultdict(list)
    for toss in events:
        opponent = toss.opponent_of(team)
        if not is_placeholder(opponent, placeholders):
            opponents[opponent].append(toss)
    return {opp: opponents[opp] for opp in sorted(opponents)}


def calculate_all_records(
    tosses: Iterable[Toss],
    game_for: GameFor,
    team_for: TeamFor = no_teams,
    thresholds: RecordThresholds | None = None,
    placeholders: Iterable[str] = PLACEHOLDER_TEAMS,
) -> RecordBook:
    """
    Compute the full record catalogue over ``tosses``.

    Args:
        tosses: Toss events in any order; not modified.
        game_for: Resolves a toss to its game, or None.
        team_for: Resolves an abbreviation to its team, or None. Used to skip
            defunct teams for the active streak records.
        thresholds: Minimum samples and breakdown sizes; defaults apply when None.
        placeholders: Team identifiers to leave out.

    Returns:
        RecordBook with every record; unclaimed records have no entries.
    """
    thresholds = thresholds or RecordThresholds()
    placeholders = frozenset(placeholders)
    history = group_by_team(tosses, placeholders)

    longest_win: RecordHolders[StreakEntry] = RecordHolders()
    longest_loss: RecordHolders[StreakEntry] = RecordHolders()
    active_win: RecordHolders[StreakEntry] = RecordHolders()
    active_loss: RecordHolders[StreakEntry] = RecordHolders()
    best_pct: RecordHolders[PercentageEntry] = RecordHolders()
    worst_pct: RecordHolders[PercentageEntry] = RecordHolders(lower_is_better=True)
    best_conversion: RecordHolders[ConversionEntry] = RecordHolders()
    defers: RecordHolders[StreakEntry] = RecordHolders()
    lopsided: RecordHolders[RivalryEntry] = RecordHolders()
    h2h: RecordHolders[HeadToHeadEntry] = RecordHolders()
    best_season: RecordHolders[SeasonEntry] = RecordHolders()
    worst_season: RecordHolders[SeasonEntry] = RecordHolders(lower_is_better=True)

    for team, events in history.items():
        for holders, run in (
            (longest_win, longest_run(events, won_by(team))),
            (longest_loss, longest_run(events, lost_by(team))),
        ):
            if run.length > 0:
                holders.offer(run.length, _streak_entry(team, run))

        team_data = team_for(team)
        if team_data is None or not team_data.defunct:
            win_run, loss_run = active_run(events, team)
            for holders, run in ((active_win, win_run), (active_loss, loss_run)):
                if run.length > 0:
                    holders.offer(run.length, _streak_entry(team, run))

        # Toss win % counts every toss, Overtime included.
        total = len(events)
        if total >= thresholds.min_tosses_for_pct:
            wins = sum(1 for toss in events if toss.winner == team)
            pct_entry = PercentageEntry(
                team=team,
                wins=wins,
                total=total,
                by_year=_by_year(team, events, thresholds.breakdown_limit),
            )
            pct = percentage(wins, total)
            best_pct.offer(pct, pct_entry)
            worst_pct.offer(pct, pct_entry)

        regular_wins = [t for t in events if t.winner == team and not t.is_overtime]

        qualifying: list[Toss] = []
        game_wins = 0
        for toss in regular_wins:
            game = game_for(toss)
            if game is None or not game.has_result:
                continue
            qualifying.append(toss)
            if game.winner == team:
                game_wins += 1
        if len(qualifying) >= thresholds.min_conversion_tosses:
            best_conversion.offer(
                percentage(game_wins, len(qualifying)),
                ConversionEntry(
                    team=team,
                    toss_wins=len(qualifying),
                    game_wins=game_wins,
                    by_opponent=_by_opponent(team, qualifying, game_for, thresholds),
                ),
            )

        defer_run = longest_run(regular_wins, lambda t: t.winner_choice == "Defer")
        if defer_run.length > 0:
            defers.offer(defer_run.length, _streak_entry(team, defer_run))

        for opponent, meetings in _split_by_opponent(team, events, placeholders).items():
            if len(meetings) >= thresholds.min_rivalry_meetings:
                wins = sum(1 for toss in meetings if toss.winner == team)
                lopsided.offer(
                    percentage(wins, len(meetings)),
                    RivalryEntry(
                        team=team,
                        opponent=opponent,
                        wins=wins,
                        losses=len(meetings) - wins,
                        tosses=tuple(meetings),
                    ),
                )
            run = longest_run(meetings, won_by(team))
            if run.length > 0:
                h2h.offer(
                    run.length, HeadToHeadEntry(team=team, opponent=opponent, tosses=run.tosses)
                )

        seasons: dict[int, list[Toss]] = defaultdict(list)
        for toss in events:
            seasons[toss.season].append(toss)
        for season in sorted(seasons):
            season_tosses = seasons[season]
            if len(season_tosses) < thresholds.min_season_decisions:
                continue
            wins = sum(1 for toss in season_tosses if toss.winner == team)
            season_entry = SeasonEntry(
                team=team,
                season=season,
                wins=wins,
                losses=len(season_tosses) - wins,
                tosses=tuple(season_tosses),
            )
            pct = percentage(wins, len(season_tosses))
            best_season.offer(pct, season_entry)
            worst_season.offer(pct, season_entry)

    logger.debug("Calculated records", teams=len(history))

    return RecordBook(
        active_win_streak=_streak_record("Active Toss Win Streak", active_win),
        active_loss_streak=_streak_record("Active Toss Loss Streak", active_loss),
        longest_win_streak=_streak_record("Longest Toss Win Streak", longest_win),
        longest_loss_streak=_streak_record("Longest Toss Loss Streak", longest_loss),
        best_toss_win_pct=PercentageRecord(
            name="Best Toss Win %", percentage=best_pct.best, entries=tuple(best_pct.entries)
        ),
        worst_toss_win_pct=PercentageRecord(
            name="Worst Toss Win %", percentage=worst_pct.best, entries=tuple(worst_pct.entries)
        ),
        best_conversion=ConversionRecord(
            name="Best Toss-to-Game Conversion",
            percentage=best_conversion.best,
            entries=tuple(best_conversion.entries),
        ),
        most_consecutive_defers=_streak_record("Most Consecutive Defers", defers),
        most_lopsided_rivalry=RivalryRecord(
            name="Most Lopsided Rivalry", percentage=lopsided.best, entries=tuple(lopsided.entries)
        ),
        longest_h2h_streak=HeadToHeadRecord(
            name="Longest Head-to-Head Streak", streak=h2h.best or 0, entries=tuple(h2h.entries)
        ),
        best_season=SeasonRecord(
            name="Best Season Toss Record",
            percentage=best_season.best,
            entries=tuple(best_season.entries),
        ),
        worst_season=SeasonRecord(
            name="Worst Season Toss Record",
            percentage=worst_season.best,
            entries=tuple(worst_season.entries),
        ),
    )
