"""Live generation backend built on pydantic-ai.

The orchestrator only depends on the ``GenerativeBackend`` protocol; tests and
offline deployments pass ``None`` or a fake. Provider imports are kept lazy to
avoid import-time errors when credentials or optional extras are missing.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from pydantic_ai import Agent

from cardgen.core.config import GenerationSettings
from cardgen.core.logging import get_logger
from cardgen.modules.flashcards.prompts import SYSTEM_PROMPT

logger = get_logger(__name__)

SUPPORTED_PROVIDERS = ("deepseek", "google", "openrouter")


class BackendNotConfiguredError(RuntimeError):
    """A provider was selected but cannot be built from the current settings."""


@runtime_checkable
class GenerativeBackend(Protocol):
    name: str

    async def complete(self, prompt: str) -> str:
        """Return the raw reply text for a prompt."""
        ...


def _build_deepseek_model(cfg: GenerationSettings, api_key: str):
    """DeepSeek speaks the OpenAI chat API (lazy import)."""
    from pydantic_ai.models.openai import OpenAIChatModel
    from pydantic_ai.providers.openai import OpenAIProvider

    provider = OpenAIProvider(api_key=api_key, base_url=cfg.deepseek_base_url)
    return OpenAIChatModel(cfg.deepseek_model, provider=provider)


def _build_google_model(cfg: GenerationSettings, api_key: str):
    """Build the Google Gemini model provider (lazy import)."""
    from pydantic_ai.models.google import GoogleModel
    from pydantic_ai.providers.google import GoogleProvider

    provider = GoogleProvider(api_key=api_key)
    return GoogleModel(cfg.gemini_model, provider=provider)


def _build_openrouter_model(cfg: GenerationSettings, api_key: str):
    """Build OpenRouter model via OpenAI-compatible provider (lazy import)."""
    from pydantic_ai.models.openai import OpenAIChatModel
    from pydantic_ai.providers.openai import OpenAIProvider

    provider = OpenAIProvider(
        api_key=api_key,
        base_url="https://openrouter.ai/api/v1",
    )
    return OpenAIChatModel(cfg.openrouter_model, provider=provider)


_MODEL_BUILDERS = {
    "deepseek": _build_deepseek_model,
    "google": _build_google_model,
    "openrouter": _build_openrouter_model,
}


class PydanticAIBackend:
    """Plain-text completion through a pydantic-ai agent.

    The reply is returned untouched; structure is enforced by the response
    parser, not by the model's output type.
    """

    def __init__(self, model, *, name: str, retries: int = 1) -> None:
        self.name = name
        self._agent: Agent[None, str] = Agent[None, str](
            model=model,
            output_type=str,
            system_prompt=SYSTEM_PROMPT,
            retries=retries,
        )

    async def complete(self, prompt: str) -> str:
        res = await self._agent.run(prompt)
        return res.output


def build_backend(cfg: GenerationSettings) -> Optional[PydanticAIBackend]:
    """Build the configured backend; ``None`` when no provider is selected."""
    provider = cfg.provider
    if not provider:
        return None
    if provider not in _MODEL_BUILDERS:
        raise BackendNotConfiguredError(
            f"Unknown model provider {provider!r}; expected one of {', '.join(SUPPORTED_PROVIDERS)}"
        )
    api_key = cfg.api_key_for(provider)
    if api_key is None:
        raise BackendNotConfiguredError(
            f"Model provider {provider!r} selected but its API key is not configured"
        )
    model = _MODEL_BUILDERS[provider](cfg, api_key)
    return PydanticAIBackend(model, name=provider, retries=cfg.retries)


def backend_from_settings(cfg: GenerationSettings) -> Optional[PydanticAIBackend]:
    """Like ``build_backend`` but degrades to ``None`` with a logged warning."""
    try:
        backend = build_backend(cfg)
    except BackendNotConfiguredError as exc:
        logger.warning("%s; using template generation", exc)
        return None
    if backend is None:
        logger.info("No live generation backend configured; using template generation")
    else:
        logger.info("Live generation backend configured: %s", backend.name)
    return backend
