"""League-wide summaries: key metrics and the streak showdown."""

from __future__ import annotations

from collections.abc import Iterable

from toss_vault.engine.common import percentage
from toss_vault.engine.lookup import GameFor
from toss_vault.engine.ordering import sort_tosses
from toss_vault.engine.streaks import streak_extremes
from toss_vault.models.stats import LeagueSummary, StreakShowdownRow
from toss_vault.models.team import Team
from toss_vault.models.toss import Toss


def league_summary(tosses: Iterable[Toss], game_for: GameFor) -> LeagueSummary:
    """
    Key metrics over a toss collection.

    The toss-winner-won-game correlation and the defer rate use Regular
    tosses only; games without both scores are left out of the correlation.
    """
    total = regular = with_results = winner_won = defers = 0
    for toss in tosses:
        total += 1
        if toss.is_overtime:
            continue
        regular += 1
        if toss.winner_choice == "Defer":
            defers += 1
        game = game_for(toss)
        if game is None or not game.has_result:
            continue
        with_results += 1
        if game.winner == toss.winner:
            winner_won += 1

    return LeagueSummary(
        total_tosses=total,
        regular_tosses=regular,
        overtime_tosses=total - regular,
        tosses_with_results=with_results,
        toss_winner_won_game=winner_won,
        win_correlation_pct=percentage(winner_won, with_results),
        defers=defers,
        defer_rate_pct=percentage(defers, regular),
    )


def streak_showdown(tosses: Iterable[Toss], teams: Iterable[Team]) -> list[StreakShowdownRow]:
    """
    Longest toss win and loss streak for each team with at least one toss.

    Returns:
        Rows sorted by longest win streak (descending), then abbreviation.
    """
    ordered = sort_tosses(tosses)
    rows = []
    for team in teams:
        events = [t for t in ordered if t.involves(team.abbreviation)]
        max_win, max_loss = streak_extremes(events, team.abbreviation)
        if max_win or max_loss:
            rows.append(
                StreakShowdownRow(
                    abbr=team.abbreviation, name=team.name, max_win=max_win, max_loss=max_loss
                )
            )
    return sorted(rows, key=lambda row: (-row.max_win, row.abbr))
