"""Pytest configuration and fixtures."""

import csv
import json
from datetime import date, timedelta

import pytest

SEASON_OPENER = date(2023, 9, 10)


@pytest.fixture
def make_toss():
    """Return a factory building Toss models with sensible defaults.

    ``week`` drives the default date (one week apart from the season opener)
    and the default game id, so tosses built with increasing weeks are in
    chronological order.
    """
    from toss_vault.models.toss import Toss

    def _create(
        winner="KC",
        loser="BUF",
        week=1,
        season=2023,
        game_date="auto",
        toss_type="Regular",
        winner_choice=None,
        game_type="Regular Season",
        game_id=None,
    ):
        if game_date == "auto":
            game_date = SEASON_OPENER.replace(year=season) + timedelta(weeks=week - 1)
        if game_id is None:
            home, away = sorted((winner, loser))
            game_id = f"{season}-{week:02d}-{home}-{away}"
        return Toss(
            game_id=game_id,
            season=season,
            week=week,
            game_date=game_date,
            game_type=game_type,
            toss_type=toss_type,
            winner=winner,
            loser=loser,
            winner_choice=winner_choice,
        )

    return _create


@pytest.fixture
def make_game():
    """Return a factory building Game models that match ``make_toss`` ids."""
    from toss_vault.models.game import Game

    def _create(home, away, home_score=None, away_score=None, week=1, season=2023, game_id=None):
        if game_id is None:
            first, second = sorted((home, away))
            game_id = f"{season}-{week:02d}-{first}-{second}"
        return Game(
            game_id=game_id,
            season=season,
            week=week,
            home_team=home,
            away_team=away,
            home_score=home_score,
            away_score=away_score,
        )

    return _create


@pytest.fixture
def lookup():
    """Return a helper turning a list of games into a ``game_for`` callable."""
    from toss_vault.engine.lookup import build_game_lookup

    return build_game_lookup


@pytest.fixture
def sample_settings(tmp_path):
    """Sample settings for testing."""
    from toss_vault.utils.config import Settings

    return Settings(
        data_dir=str(tmp_path / "data"),
        log_dir=str(tmp_path / "logs"),
        log_level="DEBUG",
        log_format="console",
    )


def _write_csv(path, rows):
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0]))
        writer.writeheader()
        writer.writerows(rows)


@pytest.fixture
def data_dir(tmp_path):
    """A small data directory: tosses.csv, games.csv and teams.json.

    2023 season, KC/BUF/MIA/NYJ:
      week 1  KC beats BUF on the toss (defers), BUF wins the game 20-17
      week 2  KC beats MIA on the toss (defers), KC wins 31-10
      week 3  BUF beats KC on the Regular toss, KC wins the OT toss, KC wins 27-24
      week 4  NYJ beats MIA on the toss (receives), no score yet
    2022 season:
      week 1  MIA beats KC on the toss (preseason)
    """
    directory = tmp_path / "data"
    directory.mkdir()

    tosses = [
        {"game_id": "1", "season": "2023", "week": "1", "game_date": "2023-09-10",
         "game_type": "Regular Season", "toss_type": "Regular", "winner": "KC",
         "loser": "BUF", "winner_choice": "Defer", "round_name": ""},
        {"game_id": "2", "season": "2023", "week": "2", "game_date": "2023-09-17",
         "game_type": "Regular Season", "toss_type": "Regular", "winner": "KC",
         "loser": "MIA", "winner_choice": "Defer", "round_name": ""},
        {"game_id": "3", "season": "2023", "week": "3", "game_date": "2023-09-24",
         "game_type": "Regular Season", "toss_type": "Overtime", "winner": "KC",
         "loser": "BUF", "winner_choice": "Receive", "round_name": ""},
        {"game_id": "3", "season": "2023", "week": "3", "game_date": "2023-09-24",
         "game_type": "Regular Season", "toss_type": "Regular", "winner": "BUF",
         "loser": "KC", "winner_choice": "Defer", "round_name": ""},
        {"game_id": "4", "season": "2023", "week": "4", "game_date": "2023-10-01",
         "game_type": "Regular Season", "toss_type": "Regular", "winner": "NYJ",
         "loser": "MIA", "winner_choice": "Receive", "round_name": ""},
        {"game_id": "5", "season": "2022", "week": "1", "game_date": "2022-08-13",
         "game_type": "Preseason", "toss_type": "Regular", "winner": "MIA",
         "loser": "KC", "winner_choice": "", "round_name": ""},
    ]
    games = [
        {"game_id": "1", "season": "2023", "week": "1", "game_date": "2023-09-10",
         "home_team": "BUF", "away_team": "KC", "home_score": "20", "away_score": "17"},
        {"game_id": "2", "season": "2023", "week": "2", "game_date": "2023-09-17",
         "home_team": "KC", "away_team": "MIA", "home_score": "31", "away_score": "10"},
        {"game_id": "3", "season": "2023", "week": "3", "game_date": "2023-09-24",
         "home_team": "KC", "away_team": "BUF", "home_score": "27", "away_score": "24"},
        {"game_id": "4", "season": "2023", "week": "4", "game_date": "2023-10-01",
         "home_team": "MIA", "away_team": "NYJ", "home_score": "", "away_score": ""},
    ]
    teams = [
        {"abbreviation": "KC", "name": "Kansas City Chiefs"},
        {"abbreviation": "BUF", "name": "Buffalo Bills"},
        {"abbreviation": "MIA", "name": "Miami Dolphins"},
        {"abbreviation": "NYJ", "name": "New York Jets", "defunct": False},
    ]

    _write_csv(directory / "tosses.csv", tosses)
    _write_csv(directory / "games.csv", games)
    (directory / "teams.json").write_text(json.dumps(teams), encoding="utf-8")
    return directory
