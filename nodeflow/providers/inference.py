"""Guess the provider from a model name."""

from nodeflow.providers.catalog import ANTHROPIC, GOOGLE, OPENAI


def infer_provider(model_id: str | None) -> str:
    """Map a model identifier to its provider by naming convention.

    First match wins (case-sensitive substring):
    - "gpt"    -> openai
    - "claude" -> anthropic
    - "gemini" -> google
    Anything else, including a missing model, falls back to openai.
    """
    if not model_id:
        return OPENAI
    if "gpt" in model_id:
        return OPENAI
    if "claude" in model_id:
        return ANTHROPIC
    if "gemini" in model_id:
        return GOOGLE
    return OPENAI
