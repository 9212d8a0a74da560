"""
Test configuration and fixtures
"""

import logging

import pytest

from hello_kubernetes.app import create_app
from hello_kubernetes.config import Config


@pytest.fixture
def app():
    """Flask app built with the default configuration"""
    return create_app(Config())


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def home_records(caplog):
    """Collects 'Home api called' records emitted while the test runs"""
    caplog.set_level(logging.INFO)

    def _records():
        return [r for r in caplog.records if "Home api called" in r.getMessage()]

    return _records
