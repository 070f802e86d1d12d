"""Data model for persisted flow graphs.

A flow graph is what the canvas saves for a project: a handful of typed
nodes plus the directed edges wiring them together. Node kinds form a
closed union keyed on ``type``; the camelCase names the canvas emits are
accepted and normalised to the canonical names on load.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator

INPUT_TEXT = "input-text"
OUTPUT_TEXT = "output-text"
AI_PROCESSING = "ai-processing"
PROMPT_TEMPLATE = "prompt-template"

CANVAS_ALIASES = {
    "textInput": INPUT_TEXT,
    "textOutput": OUTPUT_TEXT,
    "aiProcessing": AI_PROCESSING,
    "customPrompt": PROMPT_TEMPLATE,
}

INPUT_PLACEHOLDER = "{{input}}"


class NodePosition(BaseModel):
    """where the canvas drew the node."""

    x: float = 0.0
    y: float = 0.0


class InputTextData(BaseModel):
    label: str | None = None
    placeholder: str | None = None


class OutputTextData(BaseModel):
    label: str | None = None


class AIProcessingData(BaseModel):
    """settings of the node that calls an AI provider."""

    model_config = {"populate_by_name": True, "protected_namespaces": ()}

    label: str | None = None
    model: str | None = None  # e.g. "gpt-4o", "claude-3-haiku", "gemini-1.5-pro"
    temperature: float | None = Field(default=None, ge=0.0, le=1.0)
    provider: str | None = None  # inferred from the model name when missing
    api_key: str | None = Field(default=None, alias="apiKey")


class PromptTemplateData(BaseModel):
    """template text with an ``{{input}}`` placeholder."""

    model_config = {"populate_by_name": True}

    label: str | None = None
    prompt_template: str = Field(default="", alias="promptTemplate")


class _BaseNode(BaseModel):
    model_config = {"frozen": True}

    id: str
    position: NodePosition | None = None


class InputTextNode(_BaseNode):
    type: Literal["input-text"] = INPUT_TEXT
    data: InputTextData = Field(default_factory=InputTextData)


class OutputTextNode(_BaseNode):
    type: Literal["output-text"] = OUTPUT_TEXT
    data: OutputTextData = Field(default_factory=OutputTextData)


class AIProcessingNode(_BaseNode):
    type: Literal["ai-processing"] = AI_PROCESSING
    data: AIProcessingData = Field(default_factory=AIProcessingData)


class PromptTemplateNode(_BaseNode):
    type: Literal["prompt-template"] = PROMPT_TEMPLATE
    data: PromptTemplateData = Field(default_factory=PromptTemplateData)


FlowNode = Annotated[
    Union[InputTextNode, OutputTextNode, AIProcessingNode, PromptTemplateNode],
    Field(discriminator="type"),
]


class FlowEdge(BaseModel):
    """a directed edge: output of ``source`` feeds input of ``target``."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: str | None = None
    source: str
    target: str
    source_handle: str | None = Field(default=None, alias="sourceHandle")
    target_handle: str | None = Field(default=None, alias="targetHandle")


def _canonical_node(node):
    if not isinstance(node, dict):
        return node
    node = dict(node)
    node_type = node.get("type")
    if node_type in CANVAS_ALIASES:
        node["type"] = CANVAS_ALIASES[node_type]
    if node.get("data") is None:
        node.pop("data", None)
    return node


class FlowGraph(BaseModel):
    """the nodes and edges saved for one project."""

    nodes: list[FlowNode] = []
    edges: list[FlowEdge] = []

    @model_validator(mode="before")
    @classmethod
    def _normalise_node_types(cls, data):
        if isinstance(data, dict) and isinstance(data.get("nodes"), list):
            data = {**data, "nodes": [_canonical_node(n) for n in data["nodes"]]}
        return data

    def processing_nodes(self) -> list[AIProcessingNode]:
        return [node for node in self.nodes if isinstance(node, AIProcessingNode)]

    def index(self) -> "GraphIndex":
        return GraphIndex.build(self.nodes, self.edges)


@dataclass
class GraphIndex:
    """node lookup by id and incoming edges by target, built once per run.

    Only one hop upstream is ever inspected: templates chained through
    intermediate nodes are not followed.
    """

    nodes_by_id: dict[str, FlowNode] = field(default_factory=dict)
    incoming: dict[str, list[FlowEdge]] = field(default_factory=dict)

    @classmethod
    def build(cls, nodes: list[FlowNode], edges: list[FlowEdge]) -> "GraphIndex":
        nodes_by_id: dict[str, FlowNode] = {}
        for node in nodes:
            # first node wins on duplicate ids
            nodes_by_id.setdefault(node.id, node)

        incoming: dict[str, list[FlowEdge]] = defaultdict(list)
        for edge in edges:
            incoming[edge.target].append(edge)

        return cls(nodes_by_id=nodes_by_id, incoming=dict(incoming))

    def upstream_node(self, node_id: str) -> FlowNode | None:
        """source of the first edge pointing at ``node_id``, if any."""
        edges = self.incoming.get(node_id)
        if not edges:
            return None
        return self.nodes_by_id.get(edges[0].source)
