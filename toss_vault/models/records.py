"""League-wide record models.

Every record lists its holder entries; more than one entry means the
holders share the record. A record with no entries has no holder (for
example, no team reached the minimum sample).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from toss_vault.models.toss import Toss


class _Frozen(BaseModel):
    class Config:
        """Pydantic configuration."""

        frozen = True


class RecordThresholds(_Frozen):
    """Minimum samples and breakdown sizes for the record catalogue."""

    min_tosses_for_pct: int = Field(default=50, ge=0)
    min_conversion_tosses: int = Field(default=20, ge=0)
    min_rivalry_meetings: int = Field(default=5, ge=0)
    min_season_decisions: int = Field(default=10, ge=0)
    min_opponent_breakdown_tosses: int = Field(default=3, ge=0)
    breakdown_limit: int = Field(default=10, ge=1)


class BreakdownRow(_Frozen):
    """Display row in a record's supporting breakdown."""

    label: str
    value: str


class StreakEntry(_Frozen):
    team: str
    tosses: tuple[Toss, ...]
    start_date: str = ""
    end_date: str = ""


class PercentageEntry(_Frozen):
    team: str
    wins: int
    total: int
    by_year: tuple[BreakdownRow, ...] = ()


class ConversionEntry(_Frozen):
    team: str
    toss_wins: int = Field(..., description="Toss wins whose game has a result")
    game_wins: int
    by_opponent: tuple[BreakdownRow, ...] = ()


class RivalryEntry(_Frozen):
    team: str
    opponent: str
    wins: int
    losses: int
    tosses: tuple[Toss, ...]


class HeadToHeadEntry(_Frozen):
    team: str
    opponent: str
    tosses: tuple[Toss, ...]


class SeasonEntry(_Frozen):
    team: str
    season: int
    wins: int
    losses: int
    tosses: tuple[Toss, ...]


class Record(_Frozen):
    """Base record: a name plus holder entries."""

    name: str

    @property
    def holders(self) -> tuple[str, ...]:
        return tuple(entry.team for entry in self.entries)  # type: ignore[attr-defined]

    @property
    def team(self) -> str | None:
        """First holder, or None if the record is unclaimed."""
        holders = self.holders
        return holders[0] if holders else None


class StreakRecord(Record):
    streak: int = 0
    entries: tuple[StreakEntry, ...] = ()

    @property
    def tosses_by_team(self) -> dict[str, tuple[Toss, ...]]:
        return {entry.team: entry.tosses for entry in self.entries}


class PercentageRecord(Record):
    percentage: int | None = None
    entries: tuple[PercentageEntry, ...] = ()


class ConversionRecord(Record):
    percentage: int | None = None
    entries: tuple[ConversionEntry, ...] = ()


class RivalryRecord(Record):
    percentage: int | None = None
    entries: tuple[RivalryEntry, ...] = ()


class HeadToHeadRecord(Record):
    streak: int = 0
    entries: tuple[HeadToHeadEntry, ...] = ()


class SeasonRecord(Record):
    percentage: int | None = None
    entries: tuple[SeasonEntry, ...] = ()


class RecordBook(_Frozen):
    """The fixed catalogue of league-wide records."""

    active_win_streak: StreakRecord
    active_loss_streak: StreakRecord
    longest_win_streak: StreakRecord
    longest_loss_streak: StreakRecord
    best_toss_win_pct: PercentageRecord
    worst_toss_win_pct: PercentageRecord
    best_conversion: ConversionRecord
    most_consecutive_defers: StreakRecord
    most_lopsided_rivalry: RivalryRecord
    longest_h2h_streak: HeadToHeadRecord
    best_season: SeasonRecord
    worst_season: SeasonRecord

    def as_list(self) -> list[Record]:
        return [getattr(self, name) for name in type(self).model_fields]
