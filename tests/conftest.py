"""
Shared fixtures for the LevantFlow status service tests.
"""
import pytest

from levantflow.config import Config
from levantflow.factory import create_app


class ConfigForTests(Config):
    TESTING = True
    ENVIRONMENT = "test"
    EXPOSE_ERROR_DETAILS = False
    LOG_FILE_ENABLED = False
    RATELIMIT_STORAGE_URI = "memory://"
    FIREBASE_CREDENTIAL_PATH = None
    FIREBASE_PROJECT_ID = None


@pytest.fixture
def make_app():
    """Build an app with config overrides, e.g. make_app(RATELIMIT_MAX=2)."""
    def _make_app(**overrides):
        config_class = type("OverrideConfig", (ConfigForTests,), overrides)
        return create_app(config_class)
    return _make_app


@pytest.fixture
def app(make_app):
    """Create a test Flask application."""
    return make_app()


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Create a CLI runner."""
    return app.test_cli_runner()
