"""Tests for utility functions."""

import pytest


def test_settings_validation():
    """Test settings validation."""
    from toss_vault.utils.config import Settings

    settings = Settings(log_level="debug", log_format="json")
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"

    with pytest.raises(ValueError):
        Settings(log_level="INVALID")

    with pytest.raises(ValueError):
        Settings(log_format="invalid")

    with pytest.raises(ValueError):
        Settings(breakdown_limit=0)


def test_settings_defaults():
    from toss_vault.utils.config import Settings

    settings = Settings()

    assert settings.placeholder_teams == ["Unknown"]
    assert settings.min_tosses_for_pct == 50
    assert settings.min_conversion_tosses == 20
    assert settings.min_rivalry_meetings == 5
    assert settings.min_season_decisions == 10


def test_settings_from_environment(monkeypatch):
    """Settings read TOSS_VAULT_* environment variables."""
    from toss_vault.utils.config import Settings

    monkeypatch.setenv("TOSS_VAULT_MIN_RIVALRY_MEETINGS", "8")
    monkeypatch.setenv("TOSS_VAULT_DATA_DIR", "/srv/tosses")

    settings = Settings()

    assert settings.min_rivalry_meetings == 8
    assert settings.data_dir == "/srv/tosses"


def test_record_thresholds_from_settings():
    from toss_vault.models.records import RecordThresholds
    from toss_vault.utils.config import Settings

    thresholds = Settings(min_tosses_for_pct=25, breakdown_limit=5).record_thresholds()

    assert isinstance(thresholds, RecordThresholds)
    assert thresholds.min_tosses_for_pct == 25
    assert thresholds.breakdown_limit == 5
    assert thresholds.min_opponent_breakdown_tosses == 3


def test_settings_caching():
    """Test that settings are cached."""
    from toss_vault.utils.config import get_settings

    get_settings.cache_clear()

    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2


def test_ensure_directories(tmp_path, sample_settings):
    """Test directory creation."""
    from unittest.mock import patch

    from toss_vault.utils.config import ensure_directories

    with patch("toss_vault.utils.config.get_settings", return_value=sample_settings):
        ensure_directories()

    assert (tmp_path / "logs").exists()
