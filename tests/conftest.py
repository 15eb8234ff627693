"""pytest fixtures for testing."""

import pytest
from unittest.mock import Mock


def _make_response(status_code=200, payload=None, json_error=None):
    response = Mock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload if payload is not None else {}
    return response


@pytest.fixture
def make_response():
    """Factory for mock requests.Response objects."""
    return _make_response


@pytest.fixture
def mock_session():
    """Mock requests.Session returning an empty resolver payload."""
    mock = Mock()
    mock.get.return_value = _make_response(200, {})
    return mock


@pytest.fixture
def sample_config():
    """Sample configuration for testing."""
    from src.config import Config

    return Config(
        resolver_url="https://dns.google.com/resolve",
        resolver_timeout=5,
        listen_host="127.0.0.1",
        listen_port=8080,
        verbose=False,
    )


@pytest.fixture
def client(sample_config, mock_session):
    """Flask test client backed by the mock resolver session."""
    from src.app import create_app
    from src.services.doh_client import DohResolver
    from src.services.verifier import BotVerifier

    resolver = DohResolver(sample_config.resolver_url, session=mock_session)
    app = create_app(sample_config, verifier=BotVerifier(resolver))
    app.config["TESTING"] = True
    return app.test_client()
