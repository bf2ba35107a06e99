"""Pure statistics engine over toss, game, and team collections.

Nothing in this package performs I/O or mutates its inputs; every function
returns freshly allocated results.
"""

from toss_vault.engine.filters import TossFilter, available_game_types, available_seasons
from toss_vault.engine.league import league_summary, streak_showdown
from toss_vault.engine.lookup import build_game_lookup, build_team_lookup
from toss_vault.engine.opponents import (
    calculate_opponent_stats,
    calculate_opponent_stats_for_team,
    head_to_head,
)
from toss_vault.engine.ordering import compare_tosses, format_game_date, sort_tosses
from toss_vault.engine.records import RecordHolders, calculate_all_records
from toss_vault.engine.streaks import active_run, current_streak, longest_run
from toss_vault.engine.teams import calculate_team_stats, game_log, game_record, team_stat

__all__ = [
    "RecordHolders",
    "TossFilter",
    "active_run",
    "available_game_types",
    "available_seasons",
    "build_game_lookup",
    "build_team_lookup",
    "calculate_all_records",
    "calculate_opponent_stats",
    "calculate_opponent_stats_for_team",
    "calculate_team_stats",
    "compare_tosses",
    "current_streak",
    "format_game_date",
    "game_log",
    "game_record",
    "head_to_head",
    "league_summary",
    "longest_run",
    "sort_tosses",
    "streak_showdown",
    "team_stat",
]
