"""Error taxonomy for flow execution.

Every error carries the HTTP status the API layer answers with, so the
server can turn any of them into a ``{"error": message}`` body.
"""


class FlowError(Exception):
    """Base class for all errors raised while handling a flow request."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FlowError):
    """A required request field is missing or empty."""

    status_code = 400


class InvalidConfiguration(FlowError):
    """The stored graph lacks a node the executor needs."""

    status_code = 400


class CredentialMissing(FlowError):
    """No usable API key was found for the provider."""

    status_code = 400

    def __init__(self, provider: str) -> None:
        super().__init__(f"No API key found for provider: {provider}")
        self.provider = provider


class UnsupportedProvider(FlowError):
    status_code = 400

    def __init__(self, provider: str | None) -> None:
        super().__init__(f"Unsupported AI provider: {provider}")
        self.provider = provider


class UpstreamError(FlowError):
    """The vendor SDK call failed."""

    status_code = 500

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        model: str | None = None,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.model = model


class ModelNotFound(UpstreamError):
    """The vendor rejected the requested model as unknown."""

    def __init__(self, provider: str, model: str) -> None:
        super().__init__(f"Model not found: {model}", provider=provider, model=model)


class NotFound(FlowError):
    status_code = 404


class AuthenticationRequired(FlowError):
    status_code = 401
