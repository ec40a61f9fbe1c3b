"""Shared fixtures for the App1 and App2 tests."""

import pytest
import requests

from app1.app import create_app as create_leaf_app
from common.settings import CallerSettings, LeafSettings

SETTINGS_ENV_VARS = (
    "PORT",
    "BIND_HOST",
    "SERVICE_NAME",
    "SERVICE_VERSION",
    "APP1_SERVICE",
    "APP1_PORT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep the developer's environment and .env out of every test."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def leaf_settings():
    return LeafSettings(_env_file=None)


@pytest.fixture
def caller_settings():
    return CallerSettings(_env_file=None)


@pytest.fixture
def leaf_client(leaf_settings):
    return create_leaf_app(leaf_settings).test_client()


def make_requests_response(url, status_code, body, content_type="application/json"):
    """Build a `requests.Response` without touching the network."""
    response = requests.Response()
    response.url = url
    response.status_code = status_code
    response.headers["Content-Type"] = content_type
    response._content = body
    return response


class LeafTransport:
    """Stands in for `requests.get`, answering from an in-process App1.

    Records each URL it was asked for.
    """

    def __init__(self, leaf_client):
        self.leaf_client = leaf_client
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append(url)
        leaf_response = self.leaf_client.get("/")
        return make_requests_response(
            url,
            leaf_response.status_code,
            leaf_response.get_data(),
            leaf_response.content_type,
        )


@pytest.fixture
def leaf_transport(monkeypatch, leaf_client):
    transport = LeafTransport(leaf_client)
    monkeypatch.setattr("app2.client.requests.get", transport)
    return transport
