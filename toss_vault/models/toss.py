"""Toss models.

A toss is one coin-flip event. Every game has a Regular toss; a game that
went to overtime has one additional Overtime toss.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

TossType = Literal["Regular", "Overtime"]
GameType = Literal["Preseason", "Regular Season", "Postseason"]
WinnerChoice = Literal["Defer", "Receive"]

GAME_TYPE_ORDER: dict[str, int] = {"Preseason": 1, "Regular Season": 2, "Postseason": 3}

_GAME_TYPE_ALIASES = {
    "preseason": "Preseason",
    "pre": "Preseason",
    "regular season": "Regular Season",
    "regular": "Regular Season",
    "regularseason": "Regular Season",
    "postseason": "Postseason",
    "post": "Postseason",
    "playoffs": "Postseason",
}


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


def normalize_game_type(v: Any) -> Any:
    """Map loose spellings ('preseason', 'REGULAR', ...) onto the canonical game type."""
    if isinstance(v, str):
        return _GAME_TYPE_ALIASES.get(v.strip().lower(), v.strip())
    return v


class Toss(BaseModel):
    """One coin-flip event belonging to a game."""

    game_id: str = Field(..., description="Identifier of the game this toss belongs to")
    season: int = Field(..., description="Season year")
    week: int = Field(..., description="Week number within the season phase")
    game_date: date | None = Field(None, description="Calendar date (YYYY-MM-DD), may be missing")
    game_type: GameType = Field(..., description="Preseason, Regular Season, or Postseason")
    toss_type: TossType = Field(default="Regular", description="Regular or Overtime")
    winner: str = Field(..., min_length=1, description="Abbreviation of the toss winner")
    loser: str = Field(..., min_length=1, description="Abbreviation of the toss loser")
    winner_choice: WinnerChoice | None = Field(None, description="Defer or Receive")
    round_name: str | None = Field(None, description="Postseason round label")

    @field_validator("game_id", mode="before")
    @classmethod
    def coerce_game_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("game_date", "winner_choice", "round_name", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("game_type", mode="before")
    @classmethod
    def canonical_game_type(cls, v: Any) -> Any:
        return normalize_game_type(v)

    @model_validator(mode="after")
    def check_distinct_teams(self) -> Toss:
        if self.winner == self.loser:
            raise ValueError(f"winner and loser must differ, got '{self.winner}' for both")
        return self

    @property
    def is_overtime(self) -> bool:
        return self.toss_type == "Overtime"

    @property
    def teams(self) -> frozenset[str]:
        """The unordered pair of teams in this toss."""
        return frozenset((self.winner, self.loser))

    def involves(self, team: str) -> bool:
        return team in (self.winner, self.loser)

    def opponent_of(self, team: str) -> str:
        """Return the other participant; ``team`` must be one of the two."""
        return self.loser if self.winner == team else self.winner

    class Config:
        """Pydantic configuration."""

        frozen = True
        from_attributes = True
