"""API routes that run flows against an AI provider.

- ``POST /ai/process``: quick test with the AI parameters in the body.
- ``POST /embedded/{project_id}/process``: run a project's saved graph.
  Public on purpose (used by embedded widgets); keys resolve against the
  project owner.
"""

from fastapi import APIRouter, Depends

from nodeflow.flow.executor import FlowExecutor
from nodeflow.models.execution import (
    DirectExecutionRequest,
    DirectExecutionResponse,
    GraphExecutionRequest,
    GraphExecutionResponse,
)
from server.deps import get_executor

router = APIRouter()


@router.post("/ai/process", response_model=DirectExecutionResponse)
async def process_direct(
    request: DirectExecutionRequest,
    executor: FlowExecutor = Depends(get_executor),
) -> DirectExecutionResponse:
    """Run a single prompt with inline provider settings."""
    result = await executor.execute_direct(request)
    return DirectExecutionResponse(result=result)


@router.post("/embedded/{project_id}/process", response_model=GraphExecutionResponse)
async def process_embedded(
    project_id: str,
    request: GraphExecutionRequest,
    executor: FlowExecutor = Depends(get_executor),
) -> GraphExecutionResponse:
    """Run the stored graph of a project for one input."""
    output = await executor.execute_project(project_id, request.input)
    return GraphExecutionResponse(output=output)
