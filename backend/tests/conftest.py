"""Shared fixtures: immutable test settings and an app wired to them."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from nasa_client import NasaClient

TEST_API_KEY = "test-key"


@pytest.fixture
def settings() -> Settings:
    return Settings(port=5999, nasa_api_key=TEST_API_KEY, timeout_seconds=10.0)


@pytest.fixture
def nasa_client(settings: Settings) -> NasaClient:
    return NasaClient(settings)


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
