# src/mr_reviewer/providers/claude.py
import logging
from .base import LLMProvider
from mr_reviewer.errors import ResponseShapeError
from mr_reviewer.models.wire import MessagesReply


logger = logging.getLogger(__name__)


class ClaudeProvider(LLMProvider):
    name = "claude"

    def _headers(self) -> dict[str, str]:
        headers = {**super()._headers(), "x-api-key": self.config.api_key}
        if self.config.api_version:
            headers["anthropic-version"] = self.config.api_version
        return headers

    async def submit(self, prompt: str) -> str:
        response = await self._post(
            self.config.endpoint,
            {
                "model": self.config.model,
                "max_tokens": self.config.max_tokens,
                "messages": [{
                    "role": "user",
                    "content": [{"type": "text", "text": prompt}],
                }],
            },
        )
        reply = self._parse(response, MessagesReply)

        if not reply.content:
            raise ResponseShapeError("no content in response")

        text = reply.content[0].text
        logger.info(f"Claude response length: {len(text)} chars, stop reason: {reply.stop_reason}")
        return text
