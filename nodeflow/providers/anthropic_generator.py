"""Anthropic messages API."""

import anthropic

from nodeflow.providers.base import TextGenerator
from nodeflow.providers.catalog import ANTHROPIC

# anthropic requires max_tokens
MAX_OUTPUT_TOKENS = 1000


class AnthropicGenerator(TextGenerator):
    provider = ANTHROPIC

    async def generate(
        self,
        model: str,
        prompt: str,
        temperature: float,
        api_key: str,
    ) -> str:
        async with anthropic.AsyncAnthropic(api_key=api_key) as client:
            response = await client.messages.create(
                model=model,
                max_tokens=MAX_OUTPUT_TOKENS,
                temperature=temperature,
                messages=[{"role": "user", "content": prompt}],
            )

        if not response.content:
            return ""
        return getattr(response.content[0], "text", "") or ""
