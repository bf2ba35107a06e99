"""Season-window and game-type filtering of toss collections."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from toss_vault.models.toss import GAME_TYPE_ORDER, GameType, Toss

SeasonWindow = Literal["all", "last1", "last5", "last10", "custom"]

_WINDOW_SIZES = {"last1": 1, "last5": 5, "last10": 10}


def available_seasons(tosses: Iterable[Toss]) -> list[int]:
    """Distinct seasons, newest first."""
    return sorted({toss.season for toss in tosses}, reverse=True)


def available_game_types(tosses: Iterable[Toss]) -> list[str]:
    """Distinct game types in Preseason, Regular Season, Postseason order."""
    return sorted({toss.game_type for toss in tosses}, key=lambda t: GAME_TYPE_ORDER.get(t, 99))


class TossFilter(BaseModel):
    """Selects tosses by season window and game type.

    ``last1``/``last5``/``last10`` keep the newest N seasons present in the
    data being filtered; ``custom`` keeps ``season_start``..``season_end``
    inclusive. An empty ``game_types`` keeps every game type.
    """

    season_window: SeasonWindow = Field(default="all")
    season_start: int | None = Field(None, description="First season for the custom window")
    season_end: int | None = Field(None, description="Last season for the custom window")
    game_types: tuple[GameType, ...] = Field(default=())

    @model_validator(mode="after")
    def check_custom_range(self) -> TossFilter:
        if self.season_window != "custom":
            return self
        if self.season_start is None or self.season_end is None:
            raise ValueError("custom season window needs season_start and season_end")
        if self.season_start > self.season_end:
            raise ValueError(
                f"season_start ({self.season_start}) is after season_end ({self.season_end})"
            )
        return self

    @property
    def is_noop(self) -> bool:
        return self.season_window == "all" and not self.game_types

    def apply(self, tosses: Iterable[Toss]) -> list[Toss]:
        """Return a new list with the tosses that pass the filter, input order kept."""
        tosses = list(tosses)
        if self.season_window in _WINDOW_SIZES:
            keep = set(available_seasons(tosses)[: _WINDOW_SIZES[self.season_window]])
            tosses = [t for t in tosses if t.season in keep]
        elif self.season_window == "custom":
            start, end = self.season_start or 0, self.season_end or 0
            tosses = [t for t in tosses if start <= t.season <= end]

        if self.game_types:
            tosses = [t for t in tosses if t.game_type in self.game_types]
        return tosses
