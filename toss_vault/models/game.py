"""Game models."""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from toss_vault.models.toss import GameType, normalize_game_type

GameOutcome = Literal["won", "lost", "tie"]
GameKey = tuple[int, int, str, str]


class Game(BaseModel):
    """One scheduled contest between two teams, with an optional final score.

    Null scores mean the game is unplayed or its result is missing; such a game
    is "no data" for every outcome statistic, never a loss or a tie.
    """

    game_id: str = Field(..., description="Game identifier referenced by tosses")
    season: int = Field(..., description="Season year")
    week: int = Field(..., description="Week number")
    game_date: date | None = Field(None, description="Calendar date (YYYY-MM-DD)")
    game_type: GameType | None = Field(None, description="Preseason, Regular Season, or Postseason")
    home_team: str = Field(..., min_length=1, description="Home team abbreviation")
    away_team: str = Field(..., min_length=1, description="Away team abbreviation")
    home_score: int | None = Field(None, ge=0, description="Home team final score")
    away_score: int | None = Field(None, ge=0, description="Away team final score")
    venue: str | None = Field(None, description="Venue name")
    city: str | None = Field(None, description="Venue city")
    state: str | None = Field(None, description="Venue state")

    @field_validator("game_id", mode="before")
    @classmethod
    def coerce_game_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator(
        "game_date", "game_type", "home_score", "away_score", "venue", "city", "state",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("game_type", mode="before")
    @classmethod
    def canonical_game_type(cls, v: Any) -> Any:
        return normalize_game_type(v)

    @property
    def has_result(self) -> bool:
        return self.home_score is not None and self.away_score is not None

    @property
    def is_tie(self) -> bool:
        return self.has_result and self.home_score == self.away_score

    @property
    def winner(self) -> str | None:
        """Team with the strictly greater score; None for ties and missing results."""
        home, away = self.home_score, self.away_score
        if home is None or away is None or home == away:
            return None
        return self.home_team if home > away else self.away_team

    @property
    def key(self) -> GameKey:
        """Unique game key used to count a Regular+Overtime pair as one game."""
        return (self.season, self.week, self.home_team, self.away_team)

    def outcome_for(self, team: str) -> GameOutcome | None:
        """Result of the game from ``team``'s side, or None without a result."""
        if not self.has_result or team not in (self.home_team, self.away_team):
            return None
        if self.is_tie:
            return "tie"
        return "won" if self.winner == team else "lost"

    class Config:
        """Pydantic configuration."""

        frozen = True
        from_attributes = True
