"""Tests for CLI commands."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(tmp_path):
    """Route CLI logging into tmp_path and keep it off the captured output."""
    from toss_vault.utils.config import Settings
    from toss_vault.utils.logging import setup_logging

    settings = Settings(log_dir=str(tmp_path / "logs"), log_level="CRITICAL")
    with (
        patch("toss_vault.cli.setup_logging", side_effect=lambda: setup_logging(settings)),
        patch("toss_vault.cli.ensure_directories"),
    ):
        yield settings


def _invoke(*args):
    from toss_vault.cli import app

    return runner.invoke(app, list(args))


# ---------------------------------------------------------------------------
# stats teams
# ---------------------------------------------------------------------------


def test_stats_teams_json(data_dir):
    result = _invoke("stats", "teams", "--data-dir", str(data_dir), "--format", "json")

    assert result.exit_code == 0
    stats = {row["abbr"]: row for row in json.loads(result.stdout)}
    assert list(stats) == ["BUF", "KC", "MIA", "NYJ"]
    kc = stats["KC"]
    assert (kc["total_tosses"], kc["toss_wins"], kc["toss_win_pct"]) == (4, 2, 50)
    assert kc["game_win_pct"] == 50
    assert kc["defer_pct"] == 100
    assert kc["current_streak"] == 1
    assert stats["BUF"]["current_streak"] == -1
    assert stats["MIA"]["current_streak"] == -2


def test_stats_teams_table(data_dir):
    result = _invoke("stats", "teams", "--data-dir", str(data_dir))

    assert result.exit_code == 0
    assert "TEAM" in result.stdout
    kc_line = next(line for line in result.stdout.splitlines() if line.startswith("KC"))
    assert kc_line.split()[-1] == "W1"


def test_stats_teams_season_window(data_dir):
    result = _invoke(
        "stats", "teams", "--data-dir", str(data_dir), "--season-window", "last1", "-f", "json"
    )

    assert result.exit_code == 0
    stats = {row["abbr"]: row for row in json.loads(result.stdout)}
    assert stats["KC"]["total_tosses"] == 3


def test_stats_teams_game_type(data_dir):
    result = _invoke(
        "stats", "teams", "--data-dir", str(data_dir), "--game-type", "preseason", "-f", "json"
    )

    assert result.exit_code == 0
    assert [row["abbr"] for row in json.loads(result.stdout)] == ["KC", "MIA"]


def test_stats_teams_missing_data_dir(tmp_path):
    result = _invoke("stats", "teams", "--data-dir", str(tmp_path / "missing"))

    assert result.exit_code == 1
    assert "FAIL" in result.output
    assert "Could not load toss data" in result.output


def test_stats_teams_invalid_format(data_dir):
    result = _invoke("stats", "teams", "--data-dir", str(data_dir), "--format", "xml")

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_stats_teams_custom_window_needs_range(data_dir):
    result = _invoke("stats", "teams", "--data-dir", str(data_dir), "--season-window", "custom")

    assert result.exit_code == 1
    assert "FAIL" in result.output


# ---------------------------------------------------------------------------
# stats team / opponents / matchup
# ---------------------------------------------------------------------------


def test_stats_team_table(data_dir):
    result = _invoke("stats", "team", "KC", "--data-dir", str(data_dir))

    assert result.exit_code == 0
    assert "KC - Kansas City Chiefs" in result.stdout
    assert "2-1-0 (0.667)" in result.stdout
    assert "Streak:       W1" in result.stdout


def test_stats_team_json(data_dir):
    result = _invoke("stats", "team", "BUF", "--data-dir", str(data_dir), "-f", "json")

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["stat"]["total_tosses"] == 2
    assert payload["record"]["overall"] == {"wins": 1, "losses": 1, "ties": 0}


def test_stats_team_unknown(data_dir):
    result = _invoke("stats", "team", "DEN", "--data-dir", str(data_dir))

    assert result.exit_code == 1
    assert "No tosses found for team 'DEN'" in result.output


def test_stats_opponents_json(data_dir):
    result = _invoke("stats", "opponents", "KC", "--data-dir", str(data_dir), "-f", "json")

    assert result.exit_code == 0
    rows = json.loads(result.stdout)
    assert [row["abbr"] for row in rows] == ["BUF", "MIA"]
    buf = rows[0]
    assert (buf["total_matchups"], buf["total_tosses"], buf["toss_wins"]) == (2, 3, 1)
    assert (buf["games_with_data"], buf["game_wins"]) == (2, 1)


def test_stats_opponents_uses_placeholder_setting(data_dir, tmp_path):
    from toss_vault.utils.config import Settings

    settings = Settings(log_dir=str(tmp_path / "logs"), placeholder_teams=["MIA"])
    with patch("toss_vault.cli.stats.get_settings", return_value=settings):
        result = _invoke("stats", "opponents", "KC", "--data-dir", str(data_dir), "-f", "json")

    assert result.exit_code == 0
    assert [row["abbr"] for row in json.loads(result.stdout)] == ["BUF"]


def test_stats_matchup(data_dir):
    result = _invoke("stats", "matchup", "KC", "BUF", "--data-dir", str(data_dir))

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "KC 2 - 1 BUF"
    assert "(OT)" in lines[1]
    assert lines[1].split()[0] == "9/24/2023"


def test_stats_matchup_same_team(data_dir):
    result = _invoke("stats", "matchup", "KC", "KC", "--data-dir", str(data_dir))

    assert result.exit_code == 1
    assert "FAIL" in result.output


# ---------------------------------------------------------------------------
# stats league / showdown
# ---------------------------------------------------------------------------


def test_stats_league_json(data_dir):
    result = _invoke("stats", "league", "--data-dir", str(data_dir), "-f", "json")

    assert result.exit_code == 0
    summary = json.loads(result.stdout)
    assert summary["total_tosses"] == 6
    assert summary["overtime_tosses"] == 1
    assert summary["tosses_with_results"] == 3
    assert summary["win_correlation_pct"] == 33
    assert summary["defer_rate_pct"] == 60


def test_stats_showdown(data_dir):
    result = _invoke("stats", "showdown", "--data-dir", str(data_dir), "-f", "json")

    assert result.exit_code == 0
    rows = json.loads(result.stdout)
    assert rows[0] == {"abbr": "KC", "name": "Kansas City Chiefs", "max_win": 2, "max_loss": 1}
    assert [row["abbr"] for row in rows[1:]] == ["BUF", "MIA", "NYJ"]


def test_stats_showdown_empty(data_dir):
    result = _invoke(
        "stats",
        "showdown",
        "--data-dir",
        str(data_dir),
        "--season-window",
        "custom",
        "--season-start",
        "2010",
        "--season-end",
        "2011",
    )

    assert result.exit_code == 0
    assert "No streak data available for selected filters" in result.stdout


# ---------------------------------------------------------------------------
# records show
# ---------------------------------------------------------------------------


def test_records_show_table(data_dir):
    result = _invoke("records", "show", "--data-dir", str(data_dir))

    assert result.exit_code == 0
    assert "Longest Toss Win Streak: 2" in result.stdout
    assert "Best Toss Win %: no qualifying team" in result.stdout


def test_records_show_json(data_dir):
    result = _invoke("records", "show", "--data-dir", str(data_dir), "-f", "json")

    assert result.exit_code == 0
    book = json.loads(result.stdout)
    assert book["longest_win_streak"]["streak"] == 2
    assert [e["team"] for e in book["longest_win_streak"]["entries"]] == ["KC"]
    assert [e["team"] for e in book["longest_loss_streak"]["entries"]] == ["MIA"]
    assert book["best_toss_win_pct"]["entries"] == []


def test_records_show_uses_settings_thresholds(data_dir, tmp_path):
    from toss_vault.utils.config import Settings

    settings = Settings(log_dir=str(tmp_path / "logs"), min_tosses_for_pct=3)
    with patch("toss_vault.cli.records.get_settings", return_value=settings):
        result = _invoke("records", "show", "--data-dir", str(data_dir))

    assert result.exit_code == 0
    assert "Best Toss Win %: 60%" in result.stdout
    assert "  KC (3/5)" in result.stdout
    assert "Worst Toss Win %: 33%" in result.stdout
