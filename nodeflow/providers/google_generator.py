"""Google Gemini via the google-genai SDK.

A "model not found" answer is re-raised as ``ModelNotFound`` so the
dispatcher can fall back to the default Gemini model.
"""

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from nodeflow.exceptions import ModelNotFound
from nodeflow.providers.base import TextGenerator
from nodeflow.providers.catalog import GOOGLE


def _is_model_not_found(error: genai_errors.APIError) -> bool:
    if error.code == 404 or error.status == "NOT_FOUND":
        return True
    return "not found" in (error.message or str(error)).lower()


class GoogleGenerator(TextGenerator):
    provider = GOOGLE

    async def generate(
        self,
        model: str,
        prompt: str,
        temperature: float,
        api_key: str,
    ) -> str:
        try:
            async with genai.Client(api_key=api_key).aio as client:
                response = await client.models.generate_content(
                    model=model,
                    contents=prompt,
                    config=genai_types.GenerateContentConfig(temperature=temperature),
                )
        except genai_errors.APIError as e:
            if _is_model_not_found(e):
                raise ModelNotFound(GOOGLE, model) from e
            raise
        return response.text or ""
