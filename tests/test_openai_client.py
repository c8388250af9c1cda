"""Tests for the OpenAI completion client."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from services.openai_client import CompletionClient, GenerationError

MESSAGES = [{"role": "system", "content": "s"}, {"role": "user", "content": "u"}]


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def _client(**create_kwargs) -> tuple[CompletionClient, MagicMock]:
    sdk = MagicMock()
    sdk.chat.completions.create = AsyncMock(**create_kwargs)
    return CompletionClient("sk-test", model="gpt-test", temperature=0.5, client=sdk), sdk


class TestComplete:
    def test_returns_content(self) -> None:
        client, sdk = _client(return_value=_completion("hello"))
        assert asyncio.run(client.complete(MESSAGES)) == "hello"
        sdk.chat.completions.create.assert_awaited_once_with(
            model="gpt-test", temperature=0.5, messages=MESSAGES,
        )

    def test_none_content_is_not_an_error(self) -> None:
        client, _ = _client(return_value=_completion(None))
        assert asyncio.run(client.complete(MESSAGES)) is None

    def test_api_error_no_retry(self) -> None:
        err = openai.APIConnectionError(
            request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        )
        client, sdk = _client(side_effect=err)
        with pytest.raises(GenerationError, match="Connection error"):
            asyncio.run(client.complete(MESSAGES))
        assert sdk.chat.completions.create.await_count == 1

    def test_malformed_response(self) -> None:
        client, _ = _client(return_value=SimpleNamespace(choices=[]))
        with pytest.raises(GenerationError, match="Malformed"):
            asyncio.run(client.complete(MESSAGES))

    def test_sdk_client_is_lazy(self) -> None:
        client = CompletionClient("")
        assert client._client is None
