"""Supported AI providers and the models offered for each.

The first model of every provider is its default, used whenever a request
does not name a model.
"""

from pydantic import BaseModel

OPENAI = "openai"
ANTHROPIC = "anthropic"
GOOGLE = "google"


class ModelOption(BaseModel):
    value: str
    label: str


class ProviderInfo(BaseModel):
    """A provider as shown in the node configuration panel."""

    provider: str
    label: str
    default_model: str
    models: list[ModelOption]


PROVIDER_CATALOG: dict[str, ProviderInfo] = {
    OPENAI: ProviderInfo(
        provider=OPENAI,
        label="OpenAI",
        default_model="gpt-3.5-turbo",
        models=[
            ModelOption(value="gpt-3.5-turbo", label="GPT-3.5 Turbo"),
            ModelOption(value="gpt-4", label="GPT-4"),
            ModelOption(value="gpt-4-turbo", label="GPT-4 Turbo"),
            ModelOption(value="gpt-4o", label="GPT-4o"),
        ],
    ),
    ANTHROPIC: ProviderInfo(
        provider=ANTHROPIC,
        label="Anthropic",
        default_model="claude-2",
        models=[
            ModelOption(value="claude-2", label="Claude 2"),
            ModelOption(value="claude-3-haiku", label="Claude 3 Haiku"),
            ModelOption(value="claude-3-sonnet", label="Claude 3 Sonnet"),
            ModelOption(value="claude-3-opus", label="Claude 3 Opus"),
        ],
    ),
    GOOGLE: ProviderInfo(
        provider=GOOGLE,
        label="Google AI",
        default_model="gemini-1.5-flash",
        models=[
            ModelOption(value="gemini-1.5-flash", label="Gemini 1.5 Flash"),
            ModelOption(value="gemini-1.5-pro", label="Gemini 1.5 Pro"),
            ModelOption(value="gemini-1.5-flash-8b", label="Gemini 1.5 Flash 8B"),
            ModelOption(value="gemini-1.0-pro", label="Gemini 1.0 Pro"),
            ModelOption(value="gemini-1.0-pro-vision", label="Gemini 1.0 Pro Vision"),
            ModelOption(value="gemini-2.0-flash", label="Gemini 2.0 Flash"),
        ],
    ),
}

SUPPORTED_PROVIDERS = tuple(PROVIDER_CATALOG)


def default_model(provider: str) -> str:
    """Default model for a known provider (KeyError otherwise)."""
    return PROVIDER_CATALOG[provider].default_model
