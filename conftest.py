"""Shared pytest fixtures: fake text generators and an API test client."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from nodeflow.providers.base import TextGenerator
from nodeflow.providers.dispatcher import ProviderDispatcher
from server import settings
from server.app import app
from server.deps import get_dispatcher


class ScriptedGenerator(TextGenerator):
    """Replays scripted outcomes in order; the last one repeats.

    An outcome is either the text to return or an exception to raise.
    Every call is recorded in ``calls``.
    """

    def __init__(self, provider: str, *outcomes) -> None:
        self.provider = provider
        self.outcomes = list(outcomes) or [f"{provider} output"]
        self.calls: list[dict] = []

    async def generate(self, model, prompt, temperature, api_key):
        self.calls.append(
            {
                "model": model,
                "prompt": prompt,
                "temperature": temperature,
                "api_key": api_key,
            }
        )
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def scripted_generator() -> type[ScriptedGenerator]:
    return ScriptedGenerator


@pytest.fixture
def generators() -> dict[str, ScriptedGenerator]:
    return {
        "openai": ScriptedGenerator("openai"),
        "anthropic": ScriptedGenerator("anthropic"),
        "google": ScriptedGenerator("google"),
    }


@pytest.fixture
def dispatcher(generators) -> ProviderDispatcher:
    return ProviderDispatcher(generators)


@pytest.fixture
def client(tmp_path, monkeypatch, generators) -> Generator[TestClient, None, None]:
    """API client on a throwaway database, with fake generators behind the dispatcher."""
    monkeypatch.setattr(settings, "DB_PATH", tmp_path / "nodeflow.db")
    app.dependency_overrides[get_dispatcher] = lambda: ProviderDispatcher(generators)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
