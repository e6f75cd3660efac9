"""Derivation of Claude Code's ``settings.json`` from the configuration.

The settings shape depends on the selected provider:

- ``glm`` (token-based gateway): an ``env`` block pointing Claude Code at
  the gateway, with the auth token taken from ``ZAI_API_KEY`` in the
  environment. The configuration file never stores the token.
- any other provider (account-based): no ``env`` block at all, since
  authentication comes from the signed-in account session.

Both shapes set ``alwaysThinkingEnabled: false``. Derivation is pure: the
same configuration and environment always produce an equal dict.
"""

from __future__ import annotations

from typing import Any, Mapping

from superclaude_hybrid.config.models import Configuration, ProviderConfig
from superclaude_hybrid.exceptions import MissingProviderConfigError

TOKEN_PROVIDER = "glm"

# Model tier -> settings env key.
_MODEL_ENV_KEYS: tuple[tuple[str, str], ...] = (
    ("opus", "ANTHROPIC_DEFAULT_OPUS_MODEL"),
    ("sonnet", "ANTHROPIC_DEFAULT_SONNET_MODEL"),
    ("haiku", "ANTHROPIC_DEFAULT_HAIKU_MODEL"),
)


def resolve_provider(config: Configuration, env: Mapping[str, str]) -> str:
    """Return ``DEFAULT_PROVIDER`` from the environment, else the configured default."""
    return env.get("DEFAULT_PROVIDER") or config.core.default_provider


def _provider_config(config: Configuration, provider: str) -> ProviderConfig:
    provider_config = config.core.providers.get(provider)
    if provider_config is None:
        raise MissingProviderConfigError(provider)
    return provider_config


def _token_env(config: Configuration, provider: ProviderConfig, env: Mapping[str, str]) -> dict[str, str]:
    if not provider.base_url:
        raise MissingProviderConfigError(provider.name, "missing 'base_url'")
    block = {
        "ANTHROPIC_AUTH_TOKEN": env.get("ZAI_API_KEY", ""),
        "ANTHROPIC_BASE_URL": provider.base_url,
        "API_TIMEOUT_MS": str(config.core.timeout_ms),
    }
    for tier, key in _MODEL_ENV_KEYS:
        model = provider.models.get(tier)
        if model is None:
            raise MissingProviderConfigError(provider.name, f"missing model for '{tier}'")
        block[key] = model
    return block


def derive_settings(config: Configuration, env: Mapping[str, str]) -> dict[str, Any]:
    """Compute the settings object for Claude Code.

    Args:
        config: Loaded configuration.
        env: Environment snapshot (``DEFAULT_PROVIDER``, ``ZAI_API_KEY``).

    Returns:
        A JSON-serializable dict.

    Raises:
        MissingProviderConfigError: If the resolved provider has no entry
            under ``core.provider``, or the token provider lacks its base
            URL or a model tier.
    """
    provider = resolve_provider(config, env)
    provider_config = _provider_config(config, provider)

    if provider == TOKEN_PROVIDER:
        return {
            "env": _token_env(config, provider_config, env),
            "alwaysThinkingEnabled": False,
        }
    return {"alwaysThinkingEnabled": False}
