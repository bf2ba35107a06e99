"""Lookup helpers the aggregators use to resolve games and teams.

Callers may pass any ``game_for``/``team_for`` callables; these builders
back them with a dict built once per query.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from toss_vault.models.game import Game
from toss_vault.models.team import Team
from toss_vault.models.toss import Toss

logger = structlog.get_logger(__name__)

GameFor = Callable[[Toss], Game | None]
TeamFor = Callable[[str], Team | None]


def build_game_lookup(games: Iterable[Game]) -> GameFor:
    """Return ``game_for(toss)`` resolving a toss to its game by ``game_id``."""
    index: dict[str, Game] = {}
    for game in games:
        if game.game_id in index:
            logger.debug("Duplicate game_id, keeping latest row", game_id=game.game_id)
        index[game.game_id] = game

    def game_for(toss: Toss) -> Game | None:
        return index.get(toss.game_id)

    return game_for


def build_team_lookup(teams: Iterable[Team]) -> TeamFor:
    """Return ``team_for(abbreviation)``."""
    index = {team.abbreviation: team for team in teams}
    return index.get


def no_games(toss: Toss) -> Game | None:
    """``game_for`` for callers without game data."""
    return None


def no_teams(abbreviation: str) -> Team | None:
    """``team_for`` for callers without team data."""
    return None
