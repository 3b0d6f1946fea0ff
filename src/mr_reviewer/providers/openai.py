# src/mr_reviewer/providers/openai.py
import logging
from .base import LLMProvider
from mr_reviewer.errors import ResponseShapeError
from mr_reviewer.models.wire import ResponsesReply


logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """Responses API: bearer auth, `{model, input}` body."""

    name = "openai"

    def _headers(self) -> dict[str, str]:
        return {**super()._headers(), "Authorization": f"Bearer {self.config.api_key}"}

    async def submit(self, prompt: str) -> str:
        response = await self._post(
            self.config.endpoint,
            {"model": self.config.model, "input": prompt},
        )
        reply = self._parse(response, ResponsesReply)

        # Reasoning items may precede the message
        for item in reply.output:
            if item.type != "message":
                continue
            if not item.content:
                raise ResponseShapeError("no content in message")

            text = item.content[0].text
            logger.info(f"OpenAI response length: {len(text)} chars")
            return text

        raise ResponseShapeError("no results")
