"""Vendor integrations and the dispatcher that picks between them."""

from nodeflow.providers.base import TextGenerator
from nodeflow.providers.catalog import (
    ANTHROPIC,
    GOOGLE,
    OPENAI,
    PROVIDER_CATALOG,
    SUPPORTED_PROVIDERS,
    ProviderInfo,
    default_model,
)
from nodeflow.providers.dispatcher import (
    DEFAULT_TEMPERATURE,
    GOOGLE_FALLBACK_MODEL,
    ProviderDispatcher,
    normalize_google_model,
)
from nodeflow.providers.inference import infer_provider

__all__ = [
    "TextGenerator",
    "ANTHROPIC",
    "GOOGLE",
    "OPENAI",
    "PROVIDER_CATALOG",
    "SUPPORTED_PROVIDERS",
    "ProviderInfo",
    "default_model",
    "DEFAULT_TEMPERATURE",
    "GOOGLE_FALLBACK_MODEL",
    "ProviderDispatcher",
    "normalize_google_model",
    "infer_provider",
]
