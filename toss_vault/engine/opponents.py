"""Opponent-pair aggregation.

Within one pair, a game that went to overtime counts once as a matchup and
once for the game-result numbers (deduplicated by game key), but twice for
the toss numbers: both tosses are real coin flips.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from toss_vault.engine.common import PLACEHOLDER_TEAMS, is_placeholder, percentage
from toss_vault.engine.lookup import GameFor
from toss_vault.engine.ordering import sort_tosses
from toss_vault.engine.streaks import signed_streak
from toss_vault.models.game import GameKey
from toss_vault.models.stats import HeadToHead, OpponentStat, OpponentTossEvent
from toss_vault.models.toss import Toss

logger = structlog.get_logger(__name__)


@dataclass
class _PairTally:
    """Mutable per-opponent accumulator; rebuilt on every call."""

    matchups: int = 0
    tosses: int = 0
    toss_wins: int = 0
    game_wins: int = 0
    games_with_data: int = 0
    history: list[OpponentTossEvent] = field(default_factory=list)
    outcomes: list[bool] = field(default_factory=list)
    game_keys: set[GameKey] = field(default_factory=set)

    def count_toss(self, toss: Toss, opponent_won: bool) -> None:
        self.tosses += 1
        if opponent_won:
            self.toss_wins += 1
        if not toss.is_overtime:
            self.matchups += 1

    def first_sighting(self, key: GameKey) -> bool:
        if key in self.game_keys:
            return False
        self.game_keys.add(key)
        return True

    def to_stat(self, team: str, opponent: str) -> OpponentStat:
        return OpponentStat(
            team=team,
            abbr=opponent,
            total_matchups=self.matchups,
            total_tosses=self.tosses,
            toss_wins=self.toss_wins,
            game_wins=self.game_wins,
            games_with_data=self.games_with_data,
            toss_win_pct=percentage(self.toss_wins, self.tosses),
            game_win_pct=percentage(self.game_wins, self.games_with_data),
            current_streak=signed_streak(self.outcomes),
            toss_history=tuple(self.history),
        )


def _by_matchups(stats: list[OpponentStat]) -> list[OpponentStat]:
    return sorted(stats, key=lambda s: (-s.total_matchups, s.abbr))


def calculate_opponent_stats_for_team(
    tosses: Iterable[Toss],
    team: str,
    game_for: GameFor,
    placeholders: Iterable[str] = PLACEHOLDER_TEAMS,
) -> list[OpponentStat]:
    """
    Break ``team``'s tosses down by opponent.

    Each OpponentStat describes the opponent's side of the pair: ``toss_wins``
    are tosses the opponent won against ``team``, ``game_wins`` are games the
    opponent won, and a positive ``current_streak`` means the opponent has won
    the most recent tosses between the two.

    Returns:
        Opponents sorted by number of matchups (descending), then abbreviation.
    """
    placeholders = frozenset(placeholders)
    tallies: dict[str, _PairTally] = {}

    for toss in sort_tosses(t for t in tosses if t.involves(team)):
        opponent = toss.opponent_of(team)
        if is_placeholder(opponent, placeholders):
            continue
        tally = tallies.setdefault(opponent, _PairTally())
        opponent_won = toss.winner == opponent

        tally.count_toss(toss, opponent_won)
        tally.history.append(
            OpponentTossEvent(
                season=toss.season,
                week=toss.week,
                game_date=toss.game_date,
                toss_type=toss.toss_type,
                opponent_won=opponent_won,
            )
        )
        tally.outcomes.append(opponent_won)

        game = game_for(toss)
        if game is not None and game.has_result and tally.first_sighting(game.key):
            tally.games_with_data += 1
            if game.winner == opponent:
                tally.game_wins += 1

    stats = [tally.to_stat(team, opp) for opp, tally in tallies.items()]
    return _by_matchups(stats)


def calculate_opponent_stats(
    tosses: Iterable[Toss],
    team_abbrs: Iterable[str],
    game_for: GameFor,
    placeholders: Iterable[str] = PLACEHOLDER_TEAMS,
) -> list[OpponentStat]:
    """
    Opponent breakdown for a selected group of teams.

    An opponent is any team outside ``team_abbrs`` that met a team inside it;
    tosses between two selected teams (or two unselected ones) are ignored.
    The streak here runs over unique game results: positive while the
    opponent keeps winning games against the group. Placeholder opponents
    are left out.
    """
    selected = frozenset(team_abbrs)
    placeholders = frozenset(placeholders)
    tallies: dict[str, _PairTally] = {}

    for toss in sort_tosses(tosses):
        winner_in, loser_in = toss.winner in selected, toss.loser in selected
        if winner_in == loser_in:
            continue
        opponent = toss.loser if winner_in else toss.winner
        if is_placeholder(opponent, placeholders):
            continue
        opponent_won = not winner_in
        tally = tallies.setdefault(opponent, _PairTally())
        tally.count_toss(toss, opponent_won)

        game = game_for(toss)
        if game is None or not game.has_result or not tally.first_sighting(game.key):
            continue
        tally.games_with_data += 1
        opponent_won_game = game.winner == opponent and (
            (game.home_team in selected) != (game.away_team in selected)
        )
        if opponent_won_game:
            tally.game_wins += 1
        tally.outcomes.append(opponent_won_game)

    group = ",".join(sorted(selected))
    stats = [tally.to_stat(group, opp) for opp, tally in tallies.items()]
    logger.debug("Calculated opponent stats for team group", teams=group, opponents=len(stats))
    return _by_matchups(stats)


def head_to_head(tosses: Iterable[Toss], team1: str, team2: str) -> HeadToHead:
    """Toss wins for each side of a pairing and the pair's tosses, newest first."""
    pair = frozenset((team1, team2))
    meetings = sort_tosses((t for t in tosses if t.teams == pair), reverse=True)
    return HeadToHead(
        team1=team1,
        team2=team2,
        team1_toss_wins=sum(1 for t in meetings if t.winner == team1),
        team2_toss_wins=sum(1 for t in meetings if t.winner == team2),
        tosses=tuple(meetings),
    )
