# src/mr_reviewer/providers/deepseek.py
import logging
from typing import Any
from .base import LLMProvider
from mr_reviewer.errors import ResponseShapeError
from mr_reviewer.models.wire import ChatCompletionsReply


logger = logging.getLogger(__name__)


class DeepSeekProvider(LLMProvider):
    """OpenAI-compatible chat completions endpoint."""

    name = "deepseek"

    def _headers(self) -> dict[str, str]:
        return {**super()._headers(), "Authorization": f"Bearer {self.config.api_key}"}

    async def submit(self, prompt: str) -> str:
        body: dict[str, Any] = {
            "model": self.config.model,
            "messages": [{"role": "user", "content": prompt}],
        }
        if self.config.max_tokens:
            body["max_tokens"] = self.config.max_tokens

        response = await self._post(self.config.endpoint, body)
        reply = self._parse(response, ChatCompletionsReply)

        if not reply.choices:
            raise ResponseShapeError("no choices in response")

        text = reply.choices[0].message.content or ""
        logger.info(f"DeepSeek response length: {len(text)} chars")
        return text
