# src/mr_reviewer/providers/__init__.py
from mr_reviewer.models.config import ProviderConfig, ProviderKind
from .base import LLMProvider, DEFAULT_TIMEOUT
from .claude import ClaudeProvider
from .deepseek import DeepSeekProvider
from .gemini import GeminiProvider
from .openai import OpenAIProvider

PROVIDERS: dict[ProviderKind, type[LLMProvider]] = {
    ProviderKind.OPENAI: OpenAIProvider,
    ProviderKind.CLAUDE: ClaudeProvider,
    ProviderKind.DEEPSEEK: DeepSeekProvider,
    ProviderKind.GEMINI: GeminiProvider,
}


def get_provider(kind: ProviderKind, config: ProviderConfig, timeout: float = DEFAULT_TIMEOUT) -> LLMProvider:
    """Get the adapter speaking the wire protocol of the given provider."""
    try:
        provider_cls = PROVIDERS[kind]
    except KeyError:
        raise ValueError(f"Unknown provider: {kind}") from None
    return provider_cls(config=config, timeout=timeout)


__all__ = [
    "LLMProvider",
    "OpenAIProvider",
    "ClaudeProvider",
    "DeepSeekProvider",
    "GeminiProvider",
    "PROVIDERS",
    "get_provider",
]
