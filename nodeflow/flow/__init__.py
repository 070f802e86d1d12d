"""Flow resolution and execution."""

from nodeflow.flow.credentials import resolve_api_key
from nodeflow.flow.executor import FlowExecutor, find_processing_node
from nodeflow.flow.stores import (
    CredentialStore,
    InMemoryCredentialStore,
    InMemoryProjectStore,
    ProjectStore,
)
from nodeflow.flow.templates import (
    build_prompt,
    resolve_template,
    substitute_input,
    upstream_template,
)

__all__ = [
    "resolve_api_key",
    "FlowExecutor",
    "find_processing_node",
    "CredentialStore",
    "InMemoryCredentialStore",
    "InMemoryProjectStore",
    "ProjectStore",
    "build_prompt",
    "resolve_template",
    "substitute_input",
    "upstream_template",
]
