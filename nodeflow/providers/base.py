"""Interface every vendor integration implements."""


class TextGenerator:
    """Runs one single-turn text generation against a vendor SDK.

    Implementations build their SDK client per call from ``api_key`` and
    keep no state between calls.
    """

    provider: str = ""

    async def generate(
        self,
        model: str,
        prompt: str,
        temperature: float,
        api_key: str,
    ) -> str:
        """Return the generated text ("" when the vendor returns none)."""
        raise NotImplementedError
