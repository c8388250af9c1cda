"""Shared fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from prompts.content_bank import DEFAULT_CONTENT
from server.config import Settings
from server.main import create_app
from services.selection import RandomSource


class FirstPick(RandomSource):
    """Deterministic source: first item, first k items, fixed coin."""

    def __init__(self, coin: bool = False):
        super().__init__()
        self.coin = coin

    def pick_one(self, items):
        return items[0]

    def sample(self, items, k):
        return list(items)[:k]

    def chance(self, probability):
        return self.coin


@pytest.fixture
def first_pick():
    return FirstPick


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="sk-test")


@pytest.fixture
def fake_client() -> MagicMock:
    client = MagicMock()
    client.complete = AsyncMock(return_value="Here is some gentle guidance.")
    return client


@pytest.fixture
def api(settings, fake_client) -> TestClient:
    app = create_app(settings, client=fake_client, rng=RandomSource.seeded(42),
                     bank=DEFAULT_CONTENT)
    return TestClient(app)
