# src/mr_reviewer/providers/gemini.py
import logging
from .base import LLMProvider
from mr_reviewer.errors import ResponseShapeError
from mr_reviewer.models.wire import GenerateContentReply


logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    name = "gemini"

    @property
    def url(self) -> str:
        return f"{self.config.endpoint}{self.config.model}:generateContent"

    async def submit(self, prompt: str) -> str:
        # API key travels in the query string, keep it out of the URL we log
        response = await self._post(
            self.url,
            {
                "contents": [{
                    "parts": [{"text": prompt}]
                }]
            },
            params={"key": self.config.api_key},
        )
        reply = self._parse(response, GenerateContentReply)

        if not reply.candidates:
            raise ResponseShapeError("no candidates in response")

        parts = reply.candidates[0].content.parts
        if not parts:
            raise ResponseShapeError("no parts in candidate")

        text = parts[0].text
        logger.info(f"Gemini response length: {len(text)} chars from {self.url}")
        return text
