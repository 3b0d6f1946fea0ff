# src/mr_reviewer/config.py
import logging
from collections.abc import Mapping
from pathlib import Path
import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from mr_reviewer.errors import ConfigurationError
from mr_reviewer.models.config import ProviderConfig, ProviderDefaults, ProviderKind
from mr_reviewer.review.prompts import GENERIC_PROMPT, GITLAB_PROMPT, THREADS_PROMPT


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    # Review
    provider: ProviderKind = ProviderKind.OPENAI
    threads: bool = False
    request_timeout: float = 60.0

    # Baseline variables, overridden by the ones sent with each request
    vars_file: str | None = None

    log_level: str = "INFO"


PROVIDER_DEFAULTS: dict[ProviderKind, ProviderDefaults] = {
    ProviderKind.OPENAI: ProviderDefaults(
        model="gpt-5.1-codex-mini",
        prompt=GITLAB_PROMPT,
        endpoint="https://api.openai.com/v1/responses",
    ),
    ProviderKind.CLAUDE: ProviderDefaults(
        model="claude-3-5-sonnet-20240620",
        prompt=GENERIC_PROMPT,
        endpoint="https://api.anthropic.com/v1/messages",
        max_tokens=1024,
        api_version="2023-06-01",
    ),
    ProviderKind.DEEPSEEK: ProviderDefaults(
        model="deepseek-chat",
        prompt=GENERIC_PROMPT,
        endpoint="https://api.deepseek.com/chat/completions",
        max_tokens=1024,
    ),
    ProviderKind.GEMINI: ProviderDefaults(
        model="gemini-pro",
        prompt=GENERIC_PROMPT,
        endpoint="https://generativelanguage.googleapis.com/v1beta/models/",
    ),
}

# Name of the protocol version variable, for providers that have one
VERSION_SETTINGS: dict[ProviderKind, str] = {
    ProviderKind.CLAUDE: "anthropic_version",
}


def threads_defaults(kind: ProviderKind) -> ProviderDefaults:
    """Defaults for threads mode: same provider settings, JSON-answer prompt."""
    return PROVIDER_DEFAULTS[kind].model_copy(update={"prompt": THREADS_PROMPT})


def _parse_int(value: str, default: int | None) -> int | None:
    try:
        return int(value)
    except ValueError:
        logger.debug(f"Ignoring non-numeric value {value!r}, using {default}")
        return default


def resolve_provider_config(
    vars: Mapping[str, str],
    kind: ProviderKind,
    defaults: ProviderDefaults | None = None,
) -> ProviderConfig:
    """Resolve provider settings from variables, falling back to defaults."""
    if defaults is None:
        defaults = PROVIDER_DEFAULTS[kind]
    prefix = kind.var_prefix

    api_key = vars.get(f"{prefix}api_key")
    if api_key is None:
        raise ConfigurationError(f"{prefix.upper()}API_KEY is not provided")

    max_tokens = defaults.max_tokens
    if defaults.max_tokens is not None and f"{prefix}max_tokens" in vars:
        max_tokens = _parse_int(vars[f"{prefix}max_tokens"], defaults.max_tokens)

    api_version = defaults.api_version
    version_setting = VERSION_SETTINGS.get(kind)
    if version_setting:
        api_version = vars.get(f"{prefix}{version_setting}", defaults.api_version)

    return ProviderConfig(
        kind=kind,
        api_key=api_key,
        model=vars.get(f"{prefix}model", defaults.model),
        prompt=vars.get(f"{prefix}prompt", defaults.prompt),
        endpoint=vars.get(f"{prefix}endpoint", defaults.endpoint),
        max_tokens=max_tokens,
        api_version=api_version,
    )


def load_vars_file(path: str | None) -> dict[str, str]:
    """Load baseline variables from a YAML mapping, empty if unusable."""
    if not path:
        return {}

    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load vars file {path}: {e}")
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Vars file {path} is not a mapping, ignoring it")
        return {}

    return {str(key): str(value) for key, value in data.items()}


def merge_vars(base: Mapping[str, str], overrides: Mapping[str, str]) -> dict[str, str]:
    """Request variables win over baseline ones, key by key."""
    return {**base, **overrides}
