from enum import Enum
from pydantic import BaseModel, ConfigDict


class ProviderKind(str, Enum):
    OPENAI = "openai"
    CLAUDE = "claude"
    DEEPSEEK = "deepseek"
    GEMINI = "gemini"

    @property
    def var_prefix(self) -> str:
        """Prefix of the configuration variables read for this provider."""
        if self is ProviderKind.OPENAI:
            return "reviewer_"
        return f"{self.value}_reviewer_"


class ProviderDefaults(BaseModel):
    """Compiled-in fallbacks for a provider's optional settings."""
    model_config = ConfigDict(frozen=True)

    model: str
    prompt: str
    endpoint: str
    max_tokens: int | None = None
    api_version: str | None = None


class ProviderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ProviderKind
    api_key: str
    model: str
    prompt: str
    endpoint: str
    max_tokens: int | None = None
    api_version: str | None = None
