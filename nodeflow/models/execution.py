"""Request and response shapes for running a flow.

Fields the executor requires are declared optional here so a missing one
is reported as a 400 naming the field, not as a schema error.
"""

from pydantic import BaseModel, Field


class DirectExecutionRequest(BaseModel):
    """Quick-test request: the AI parameters come with the input."""

    model_config = {"populate_by_name": True, "protected_namespaces": ()}

    input: str | None = None
    model: str | None = None
    temperature: float | None = Field(default=None, ge=0.0, le=1.0)
    provider: str | None = None
    api_key: str | None = Field(default=None, alias="apiKey", repr=False)
    prompt_template: str | None = Field(default=None, alias="promptTemplate")


class DirectExecutionResponse(BaseModel):
    result: str


class GraphExecutionRequest(BaseModel):
    """Request against a project's stored graph."""

    input: str | None = None


class GraphExecutionResponse(BaseModel):
    output: str


class ExecutionRequest(BaseModel):
    """The fully resolved call handed to a text generator.

    Built right before dispatch and dropped once the response is back.
    """

    model_config = {"frozen": True, "protected_namespaces": ()}

    provider: str
    model: str
    temperature: float
    prompt: str
    api_key: str = Field(repr=False)
