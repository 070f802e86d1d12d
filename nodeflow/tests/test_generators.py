"""Tests for the vendor generators with the SDK clients replaced by fakes."""

import asyncio
from types import SimpleNamespace

import pytest
from google.genai import errors as genai_errors

from nodeflow.exceptions import ModelNotFound
from nodeflow.providers import anthropic_generator, google_generator, openai_generator
from nodeflow.providers.anthropic_generator import AnthropicGenerator
from nodeflow.providers.google_generator import GoogleGenerator
from nodeflow.providers.openai_generator import OpenAIGenerator


class _AsyncCall:
    """Async callable that records kwargs and returns or raises ``outcome``."""

    def __init__(self, outcome) -> None:
        self.outcome = outcome
        self.kwargs: list[dict] = []

    async def __call__(self, **kwargs):
        self.kwargs.append(kwargs)
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


def _fake_sdk_client(call: _AsyncCall, attach):
    """Build a fake SDK client class; ``attach`` wires ``call`` onto an instance."""
    created = []

    class FakeClient:
        def __init__(self, api_key=None, **kwargs):
            self.api_key = api_key
            attach(self, call)
            created.append(self)

        async def __aenter__(self):
            return self

        async def __aexit__(self, *exc_info):
            return False

    FakeClient.created = created
    return FakeClient


class TestOpenAIGenerator:
    """Test the OpenAI chat completion call."""

    def _patch(self, monkeypatch, response):
        call = _AsyncCall(response)
        fake = _fake_sdk_client(
            call,
            lambda client, c: setattr(client, "chat", SimpleNamespace(completions=SimpleNamespace(create=c))),
        )
        monkeypatch.setattr(openai_generator.openai, "AsyncOpenAI", fake)
        return call, fake

    def test_returns_first_choice(self, monkeypatch):
        """The first choice should be returned with the request forwarded."""
        response = SimpleNamespace(
            choices=[
                SimpleNamespace(message=SimpleNamespace(content="first")),
                SimpleNamespace(message=SimpleNamespace(content="second")),
            ]
        )
        call, fake = self._patch(monkeypatch, response)
        text = asyncio.run(OpenAIGenerator().generate("gpt-4", "hello", 0.4, "sk-1"))

        assert text == "first"
        assert fake.created[0].api_key == "sk-1"
        assert call.kwargs[0] == {
            "model": "gpt-4",
            "messages": [{"role": "user", "content": "hello"}],
            "temperature": 0.4,
        }

    def test_empty_string_without_choices(self, monkeypatch):
        """No choices should yield an empty string."""
        self._patch(monkeypatch, SimpleNamespace(choices=[]))
        assert asyncio.run(OpenAIGenerator().generate("gpt-4", "hi", 0.7, "k")) == ""

    def test_empty_string_for_null_content(self, monkeypatch):
        """Null content should yield an empty string."""
        response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=None))])
        self._patch(monkeypatch, response)
        assert asyncio.run(OpenAIGenerator().generate("gpt-4", "hi", 0.7, "k")) == ""


class TestAnthropicGenerator:
    """Test the Anthropic messages call."""

    def _patch(self, monkeypatch, response):
        call = _AsyncCall(response)
        fake = _fake_sdk_client(
            call,
            lambda client, c: setattr(client, "messages", SimpleNamespace(create=c)),
        )
        monkeypatch.setattr(anthropic_generator.anthropic, "AsyncAnthropic", fake)
        return call

    def test_returns_first_block_with_token_budget(self, monkeypatch):
        """The first block should be returned and max_tokens set."""
        response = SimpleNamespace(content=[SimpleNamespace(text="bonjour"), SimpleNamespace(text="x")])
        call = self._patch(monkeypatch, response)
        text = asyncio.run(AnthropicGenerator().generate("claude-2", "hello", 0.2, "sk-ant"))

        assert text == "bonjour"
        assert call.kwargs[0]["max_tokens"] == 1000
        assert call.kwargs[0]["temperature"] == 0.2
        assert call.kwargs[0]["messages"] == [{"role": "user", "content": "hello"}]

    def test_empty_string_without_content(self, monkeypatch):
        """No content blocks should yield an empty string."""
        self._patch(monkeypatch, SimpleNamespace(content=[]))
        assert asyncio.run(AnthropicGenerator().generate("claude-2", "hi", 0.7, "k")) == ""


class _FakeGoogleClient:
    """Stands in for ``genai.Client``; its ``aio`` side records being closed."""

    def __init__(self, call: _AsyncCall, api_key=None, **kwargs) -> None:
        self.api_key = api_key
        self.closed = False
        self.aio = self
        self.models = SimpleNamespace(generate_content=call)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.closed = True
        return False


class TestGoogleGenerator:
    """Test the Gemini generator and its not-found mapping."""

    def _patch(self, monkeypatch, outcome):
        call = _AsyncCall(outcome)
        created = []

        def factory(api_key=None, **kwargs):
            client = _FakeGoogleClient(call, api_key=api_key, **kwargs)
            created.append(client)
            return client

        monkeypatch.setattr(google_generator.genai, "Client", factory)
        return call, created

    def test_returns_text(self, monkeypatch):
        """Response text should come back with the prompt and temperature forwarded."""
        call, created = self._patch(monkeypatch, SimpleNamespace(text="hola"))
        text = asyncio.run(GoogleGenerator().generate("gemini-1.5-pro", "hello", 0.9, "g-key"))

        assert text == "hola"
        assert created[0].api_key == "g-key"
        assert call.kwargs[0]["model"] == "gemini-1.5-pro"
        assert call.kwargs[0]["contents"] == "hello"
        assert call.kwargs[0]["config"].temperature == 0.9

    def test_empty_string_without_text(self, monkeypatch):
        """A response with no text should yield an empty string."""
        self._patch(monkeypatch, SimpleNamespace(text=None))
        assert asyncio.run(GoogleGenerator().generate("gemini-1.5-pro", "hi", 0.7, "k")) == ""

    def test_client_closed_after_call(self, monkeypatch):
        """The per-call client should be closed once the response is read."""
        _, created = self._patch(monkeypatch, SimpleNamespace(text="ok"))
        asyncio.run(GoogleGenerator().generate("gemini-1.5-pro", "hi", 0.7, "k"))
        assert [client.closed for client in created] == [True]

    def test_client_closed_after_error(self, monkeypatch):
        """The client should be closed even when the call fails."""
        error = genai_errors.ClientError(
            403,
            {"error": {"code": 403, "message": "API key not valid", "status": "PERMISSION_DENIED"}},
        )
        _, created = self._patch(monkeypatch, error)
        with pytest.raises(genai_errors.ClientError):
            asyncio.run(GoogleGenerator().generate("gemini-1.5-pro", "hi", 0.7, "bad"))
        assert [client.closed for client in created] == [True]

    def test_not_found_becomes_model_not_found(self, monkeypatch):
        """A 404 from the API should surface as ModelNotFound for the fallback."""
        error = genai_errors.ClientError(
            404,
            {"error": {"code": 404, "message": "models/gemini-x is not found", "status": "NOT_FOUND"}},
        )
        self._patch(monkeypatch, error)
        with pytest.raises(ModelNotFound) as exc_info:
            asyncio.run(GoogleGenerator().generate("gemini-x", "hello", 0.7, "g-key"))
        assert exc_info.value.model == "gemini-x"

    def test_other_api_errors_propagate(self, monkeypatch):
        """Errors other than not-found should propagate unchanged."""
        error = genai_errors.ClientError(
            403,
            {"error": {"code": 403, "message": "API key not valid", "status": "PERMISSION_DENIED"}},
        )
        self._patch(monkeypatch, error)
        with pytest.raises(genai_errors.ClientError):
            asyncio.run(GoogleGenerator().generate("gemini-1.5-pro", "hello", 0.7, "bad"))
