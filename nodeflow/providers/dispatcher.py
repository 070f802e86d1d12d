"""Route a generation call to the right vendor.

The dispatcher decides which text generator to use and with which model;
the generators only talk to their SDK. Vendor failures are logged with
their raw text and re-raised as ``UpstreamError`` with a sanitized
message.
"""

import logging

from nodeflow.exceptions import FlowError, ModelNotFound, UnsupportedProvider, UpstreamError
from nodeflow.models.execution import ExecutionRequest
from nodeflow.providers.base import TextGenerator
from nodeflow.providers.catalog import ANTHROPIC, GOOGLE, OPENAI, PROVIDER_CATALOG, default_model

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.7

GOOGLE_FALLBACK_MODEL = "gemini-1.5-flash"
GOOGLE_MODEL_ALLOW_LIST = frozenset(
    {
        "gemini-1.5-pro",
        "gemini-1.0-pro",
        "gemini-1.0-pro-vision",
        "gemini-1.5-flash-8b",
        "gemini-2.0-flash",
    }
)
GOOGLE_FALLBACK_FAILED_MESSAGE = (
    "Unable to reach a Google AI model. Check API key validity and "
    "regional model availability."
)


def normalize_google_model(model: str | None) -> str:
    """Honour allow-listed Gemini models, collapse everything else to the default."""
    if model in GOOGLE_MODEL_ALLOW_LIST:
        return model
    return GOOGLE_FALLBACK_MODEL


def default_generators() -> dict[str, TextGenerator]:
    """One generator per supported provider, backed by the real SDKs."""
    from nodeflow.providers.anthropic_generator import AnthropicGenerator
    from nodeflow.providers.google_generator import GoogleGenerator
    from nodeflow.providers.openai_generator import OpenAIGenerator

    return {
        OPENAI: OpenAIGenerator(),
        ANTHROPIC: AnthropicGenerator(),
        GOOGLE: GoogleGenerator(),
    }


def _provider_label(provider: str) -> str:
    info = PROVIDER_CATALOG.get(provider)
    return info.label if info else provider


class ProviderDispatcher:
    """Send a prompt to the generator registered for a provider."""

    def __init__(self, generators: dict[str, TextGenerator] | None = None) -> None:
        self.generators = generators if generators is not None else default_generators()

    async def dispatch(
        self,
        provider: str | None,
        model: str | None,
        prompt: str,
        temperature: float | None,
        api_key: str,
    ) -> str:
        """Run one generation and return its text.

        Raises:
            UnsupportedProvider: no generator is registered for ``provider``.
            UpstreamError: the vendor call failed (after the single Google
                fallback attempt, where it applies).
        """
        generator = self.generators.get(provider) if provider else None
        if generator is None:
            raise UnsupportedProvider(provider)

        if temperature is None:
            temperature = DEFAULT_TEMPERATURE

        if provider == GOOGLE:
            return await self._dispatch_google(generator, model, prompt, temperature, api_key)

        request = ExecutionRequest(
            provider=provider,
            model=model or default_model(provider),
            temperature=temperature,
            prompt=prompt,
            api_key=api_key,
        )
        try:
            return await self._generate(generator, request)
        except ModelNotFound as e:
            raise UpstreamError(self._failure_message(request), provider, request.model) from e

    async def _dispatch_google(
        self,
        generator: TextGenerator,
        model: str | None,
        prompt: str,
        temperature: float,
        api_key: str,
    ) -> str:
        request = ExecutionRequest(
            provider=GOOGLE,
            model=normalize_google_model(model),
            temperature=temperature,
            prompt=prompt,
            api_key=api_key,
        )
        try:
            return await self._generate(generator, request)
        except ModelNotFound:
            logger.warning(
                "google model %s not found, retrying with %s",
                request.model,
                GOOGLE_FALLBACK_MODEL,
            )

        fallback = request.model_copy(update={"model": GOOGLE_FALLBACK_MODEL})
        try:
            return await self._generate(generator, fallback)
        except UpstreamError as e:
            raise UpstreamError(GOOGLE_FALLBACK_FAILED_MESSAGE, GOOGLE, fallback.model) from e

    async def _generate(self, generator: TextGenerator, request: ExecutionRequest) -> str:
        logger.info("dispatching to %s model=%s", request.provider, request.model)
        try:
            return await generator.generate(
                request.model,
                request.prompt,
                request.temperature,
                request.api_key,
            )
        except ModelNotFound:
            logger.error("%s reported model %s as not found", request.provider, request.model)
            raise
        except FlowError:
            raise
        except Exception as e:
            logger.error(
                "%s call failed for model %s: %s: %s",
                request.provider,
                request.model,
                type(e).__name__,
                e,
            )
            raise UpstreamError(self._failure_message(request), request.provider, request.model) from e

    @staticmethod
    def _failure_message(request: ExecutionRequest) -> str:
        return f"{_provider_label(request.provider)} request failed for model {request.model}"
