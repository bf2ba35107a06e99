"""Aggregate result models for team, opponent, and league statistics.

These are plain value structures with fixed, named fields. They are rebuilt
on every query and are safe to serialize with ``model_dump(mode="json")``.
Percentages are whole-number percents (0-100); an empty denominator yields 0.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from toss_vault.models.game import Game
from toss_vault.models.toss import Toss, TossType


class _Frozen(BaseModel):
    class Config:
        """Pydantic configuration."""

        frozen = True


class TeamStat(_Frozen):
    """Per-team toss rollup.

    Toss counts, defer % and game conversion use Regular tosses only; the
    streak counts Regular and Overtime tosses as separate events.
    """

    abbr: str
    total_tosses: int = Field(..., ge=0, description="Regular tosses the team took part in")
    toss_wins: int = Field(..., ge=0, description="Regular tosses the team won")
    toss_win_pct: int = Field(..., ge=0, le=100)
    game_win_pct: int = Field(..., ge=0, le=100, description="Games won after winning the toss")
    defer_pct: int = Field(..., ge=0, le=100, description="Toss wins where the team deferred")
    current_streak: int = Field(..., description="Positive: active win run, negative: loss run")


class OpponentTossEvent(_Frozen):
    """One toss in an opponent history, seen from the opponent's side."""

    season: int
    week: int
    game_date: date | None
    toss_type: TossType
    opponent_won: bool


class OpponentStat(_Frozen):
    """How ``abbr`` fared against ``team``.

    ``total_tosses``/``toss_wins`` count Regular and Overtime tosses;
    ``total_matchups`` counts Regular tosses only; the game counts are
    deduplicated per game.
    """

    team: str
    abbr: str
    total_matchups: int = Field(..., ge=0)
    total_tosses: int = Field(..., ge=0)
    toss_wins: int = Field(..., ge=0)
    game_wins: int = Field(..., ge=0)
    games_with_data: int = Field(..., ge=0)
    toss_win_pct: int = Field(..., ge=0, le=100)
    game_win_pct: int = Field(..., ge=0, le=100)
    current_streak: int
    toss_history: tuple[OpponentTossEvent, ...] = ()


class GameRecordLine(_Frozen):
    """Win-loss-tie line with winning percentage as a fraction (0.0-1.0)."""

    wins: int = 0
    losses: int = 0
    ties: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def win_pct(self) -> float:
        return round(self.wins / self.total, 3) if self.total else 0.0


class GameRecordSummary(_Frozen):
    """Actual game results for one team over unique games with scores."""

    team: str
    overall: GameRecordLine
    home: GameRecordLine
    away: GameRecordLine


class GameLogEntry(_Frozen):
    """One game in a team's log with its Regular and optional Overtime toss."""

    season: int
    week: int
    game_date: date | None
    opponent: str
    regular_toss: Toss | None = None
    overtime_toss: Toss | None = None
    game: Game | None = None

    @property
    def went_to_overtime(self) -> bool:
        return self.overtime_toss is not None


class HeadToHead(_Frozen):
    """Toss summary between two teams; ``tosses`` are newest first."""

    team1: str
    team2: str
    team1_toss_wins: int
    team2_toss_wins: int
    tosses: tuple[Toss, ...] = ()


class LeagueSummary(_Frozen):
    """League-wide key metrics over a set of tosses."""

    total_tosses: int
    regular_tosses: int
    overtime_tosses: int
    tosses_with_results: int = Field(..., description="Regular tosses whose game has a score")
    toss_winner_won_game: int
    win_correlation_pct: int = Field(..., ge=0, le=100)
    defers: int
    defer_rate_pct: int = Field(..., ge=0, le=100)


class StreakShowdownRow(_Frozen):
    """Longest win and loss streak for one team."""

    abbr: str
    name: str | None = None
    max_win: int
    max_loss: int
