from __future__ import annotations

import pytest
from pydantic import ValidationError

from fincast.app import create_app
from fincast.config import Settings


def test_defaults():
    settings = Settings()

    assert settings.milestone_max_years == 50
    assert settings.growth_series_years == 30
    assert settings.projection_horizons == [10, 20, 30]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FINCAST_GROWTH_SERIES_YEARS", "10")
    monkeypatch.setenv("FINCAST_PROJECTION_HORIZONS", "[30, 5, 5]")
    monkeypatch.setenv("FINCAST_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.growth_series_years == 10
    assert settings.projection_horizons == [5, 30]
    assert settings.log_level == "DEBUG"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")


def test_series_default_comes_from_settings():
    app = create_app(Settings(growth_series_years=3, log_json=False))

    with app.test_client() as client:
        resp = client.post("/api/projection/series", json={"principal": 100, "annualRate": 0})

    assert resp.status_code == 200
    assert len(resp.get_json()["points"]) == 4
