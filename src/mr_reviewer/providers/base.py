# src/mr_reviewer/providers/base.py
import logging
from abc import ABC, abstractmethod
from typing import Any, TypeVar
import httpx
from pydantic import BaseModel, ValidationError
from mr_reviewer.errors import ResponseShapeError, TransportError
from mr_reviewer.models.config import ProviderConfig


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0

ReplyT = TypeVar("ReplyT", bound=BaseModel)


class LLMProvider(ABC):
    """One LLM HTTP API: builds its request, sends it, extracts the review text."""

    name: str = "base"

    def __init__(self, config: ProviderConfig, timeout: float = DEFAULT_TIMEOUT):
        self.config = config
        self.timeout = timeout

    @abstractmethod
    async def submit(self, prompt: str) -> str:
        """Send prompt to the LLM and return the generated review text."""
        pass

    def _headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json"}

    async def _post(
        self,
        url: str,
        body: dict[str, Any],
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        async with httpx.AsyncClient() as client:
            try:
                response = await client.post(
                    url,
                    params=params,
                    headers=self._headers(),
                    json=body,
                    timeout=self.timeout,
                )
            except httpx.HTTPError as e:
                raise TransportError(f"{self.name} request failed: {e}") from e

        if not response.is_success:
            logger.warning(f"{self.name} returned status {response.status_code}")
            raise TransportError(
                f"request failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        return response

    def _parse(self, response: httpx.Response, reply_type: type[ReplyT]) -> ReplyT:
        try:
            return reply_type.model_validate_json(response.content)
        except ValidationError as e:
            raise ResponseShapeError(f"{self.name} returned an unexpected response: {e}") from e
