from __future__ import annotations

import os
from unittest.mock import Mock

import pytest


@pytest.fixture
def restore_environ():
    """Snapshot os.environ and put it back after the test."""
    original = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original)


@pytest.fixture
def clean_env(monkeypatch):
    """Drop every variable the client reads so tests see a blank environment."""
    for key in ["API_BEARER_TOKEN", "CATALOG_API_URL", "CUSTOM_TOKEN"]:
        monkeypatch.delenv(key, raising=False)
    # Keep a developer's .env from leaking into tests.
    monkeypatch.setattr("swcatalog.auth.load_env_file_if_present", lambda *a, **kw: {})
    monkeypatch.setattr("swcatalog.cli.load_env_file_if_present", lambda *a, **kw: {})


def _response(payload=None, status_code=200, json_error=None):
    response = Mock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def make_response():
    """Factory for mocked requests.Response objects."""
    return _response


@pytest.fixture
def sample_publisher():
    """A publisher record as returned by the catalog API."""
    return {
        "id": "2ce5a0a7-4e0e-4fa5-9b1f-5e4b1fbc8dd0",
        "alternativeId": "c_h501",
        "description": "Comune di Roma",
        "email": "opensource@comune.roma.it",
        "active": True,
        "codeHosting": [
            {"url": "https://github.com/comune-roma", "group": True},
            {"url": "https://gitlab.com/comune-roma/portale", "group": False},
        ],
        "createdAt": "2023-03-10T09:14:00Z",
        "updatedAt": "2024-01-22T17:40:12Z",
    }


@pytest.fixture
def sample_software():
    """A software record as returned by the catalog API."""
    return {
        "id": "8f3c1e2a-5b7d-4c6e-9a0b-1d2e3f4a5b6c",
        "url": "https://github.com/italia/design-react-kit.git",
        "aliases": [],
        "publiccodeYml": "publiccodeYmlVersion: '0.2'",
        "active": True,
        "createdAt": "2022-11-02T08:00:00Z",
        "updatedAt": "2024-05-18T12:30:45Z",
    }


@pytest.fixture
def sample_log():
    """A log entry as returned by the catalog API."""
    return {
        "id": "b0f9d1c4-7e2a-4b3c-8d5e-6f7a8b9c0d1e",
        "message": "Crawler run completed",
        "createdAt": "2024-05-18T12:31:00Z",
        "entity": "/software/8f3c1e2a-5b7d-4c6e-9a0b-1d2e3f4a5b6c",
    }
