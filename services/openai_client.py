import logging
from typing import Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """The completion call failed or returned something unusable."""


class CompletionClient:
    """
    One chat-completion call per request. No retry and no fallback model:
    a failure surfaces immediately to the caller.
    """

    def __init__(self, api_key: str, model: str = "gpt-4o-mini",
                 temperature: float = 0.9, client: Optional[AsyncOpenAI] = None):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def complete(self, messages: List[Dict[str, str]]) -> Optional[str]:
        """Returns the generated text (possibly empty or None); raises GenerationError."""
        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                messages=messages,
            )
        except OpenAIError as e:
            logger.error("[chat] completion failed: %r", e)
            raise GenerationError(str(e)) from e

        try:
            return resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            logger.error("[chat] malformed completion: %r", e)
            raise GenerationError(f"Malformed completion response: {e}") from e
