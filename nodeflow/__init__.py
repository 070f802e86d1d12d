"""nodeflow - run small no-code AI flows against OpenAI, Anthropic or Google."""

from nodeflow.models.flow_graph import (
    AIProcessingNode,
    FlowEdge,
    FlowGraph,
    InputTextNode,
    OutputTextNode,
    PromptTemplateNode,
)
from nodeflow.models.project import FlowConfig, Project
from nodeflow.flow.executor import FlowExecutor
from nodeflow.flow.templates import resolve_template, substitute_input
from nodeflow.providers.dispatcher import ProviderDispatcher
from nodeflow.providers.inference import infer_provider

__all__ = [
    # Graph
    "AIProcessingNode",
    "FlowEdge",
    "FlowGraph",
    "InputTextNode",
    "OutputTextNode",
    "PromptTemplateNode",
    # Projects
    "FlowConfig",
    "Project",
    # High-level APIs
    "FlowExecutor",
    "ProviderDispatcher",
    "infer_provider",
    "resolve_template",
    "substitute_input",
]
