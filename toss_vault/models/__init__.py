"""Pydantic models for toss data and derived statistics."""

from toss_vault.models.game import Game, GameKey, GameOutcome
from toss_vault.models.records import (
    BreakdownRow,
    ConversionEntry,
    ConversionRecord,
    HeadToHeadEntry,
    HeadToHeadRecord,
    PercentageEntry,
    PercentageRecord,
    Record,
    RecordBook,
    RecordThresholds,
    RivalryEntry,
    RivalryRecord,
    SeasonEntry,
    SeasonRecord,
    StreakEntry,
    StreakRecord,
)
from toss_vault.models.stats import (
    GameLogEntry,
    GameRecordLine,
    GameRecordSummary,
    HeadToHead,
    LeagueSummary,
    OpponentStat,
    OpponentTossEvent,
    StreakShowdownRow,
    TeamStat,
)
from toss_vault.models.team import Team
from toss_vault.models.toss import GAME_TYPE_ORDER, GameType, Toss, TossType, WinnerChoice

__all__ = [
    "GAME_TYPE_ORDER",
    "BreakdownRow",
    "ConversionEntry",
    "ConversionRecord",
    "Game",
    "GameKey",
    "GameLogEntry",
    "GameOutcome",
    "GameRecordLine",
    "GameRecordSummary",
    "GameType",
    "HeadToHead",
    "HeadToHeadEntry",
    "HeadToHeadRecord",
    "LeagueSummary",
    "OpponentStat",
    "OpponentTossEvent",
    "PercentageEntry",
    "PercentageRecord",
    "Record",
    "RecordBook",
    "RecordThresholds",
    "RivalryEntry",
    "RivalryRecord",
    "SeasonEntry",
    "SeasonRecord",
    "StreakEntry",
    "StreakRecord",
    "StreakShowdownRow",
    "Team",
    "TeamStat",
    "Toss",
    "TossType",
    "WinnerChoice",
]
