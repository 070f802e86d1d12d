"""Core data models for nodeflow."""

from nodeflow.models.flow_graph import (
    AI_PROCESSING,
    INPUT_PLACEHOLDER,
    INPUT_TEXT,
    OUTPUT_TEXT,
    PROMPT_TEMPLATE,
    AIProcessingData,
    AIProcessingNode,
    FlowEdge,
    FlowGraph,
    FlowNode,
    GraphIndex,
    InputTextNode,
    OutputTextNode,
    PromptTemplateData,
    PromptTemplateNode,
)
from nodeflow.models.project import (
    FlowConfig,
    Project,
    ProjectCreate,
    ProjectExport,
    ProjectUpdate,
)
from nodeflow.models.api_key import (
    ApiKeySummary,
    ApiKeyUpsert,
    StoredApiKey,
    mask_api_key,
)
from nodeflow.models.execution import (
    DirectExecutionRequest,
    DirectExecutionResponse,
    ExecutionRequest,
    GraphExecutionRequest,
    GraphExecutionResponse,
)

__all__ = [
    # Flow graph
    "AI_PROCESSING",
    "INPUT_PLACEHOLDER",
    "INPUT_TEXT",
    "OUTPUT_TEXT",
    "PROMPT_TEMPLATE",
    "AIProcessingData",
    "AIProcessingNode",
    "FlowEdge",
    "FlowGraph",
    "FlowNode",
    "GraphIndex",
    "InputTextNode",
    "OutputTextNode",
    "PromptTemplateData",
    "PromptTemplateNode",
    # Projects
    "FlowConfig",
    "Project",
    "ProjectCreate",
    "ProjectExport",
    "ProjectUpdate",
    # API keys
    "ApiKeySummary",
    "ApiKeyUpsert",
    "StoredApiKey",
    "mask_api_key",
    # Execution
    "DirectExecutionRequest",
    "DirectExecutionResponse",
    "ExecutionRequest",
    "GraphExecutionRequest",
    "GraphExecutionResponse",
]
