"""OpenAI chat completions."""

import openai

from nodeflow.providers.base import TextGenerator
from nodeflow.providers.catalog import OPENAI


class OpenAIGenerator(TextGenerator):
    provider = OPENAI

    async def generate(
        self,
        model: str,
        prompt: str,
        temperature: float,
        api_key: str,
    ) -> str:
        async with openai.AsyncOpenAI(api_key=api_key) as client:
            response = await client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
            )

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
