from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from fincast.app import create_app
from fincast.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(log_json=False, log_level="WARNING")


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    app = create_app(settings)
    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client
