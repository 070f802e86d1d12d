"""Prompt-template lookup and input substitution."""

from nodeflow.models.flow_graph import (
    INPUT_PLACEHOLDER,
    FlowEdge,
    FlowNode,
    GraphIndex,
    PromptTemplateNode,
)


def substitute_input(template: str, input_text: str) -> str:
    """Replace every literal ``{{input}}`` with the raw input text.

    No escaping and no recursive substitution: placeholders that appear in
    ``input_text`` itself are left alone.
    """
    return template.replace(INPUT_PLACEHOLDER, input_text)


def upstream_template(index: GraphIndex, processing_node_id: str) -> str | None:
    """Template of the node wired straight into the processing node, if it is one."""
    node = index.upstream_node(processing_node_id)
    if isinstance(node, PromptTemplateNode):
        return node.data.prompt_template
    return None


def resolve_template(
    nodes: list[FlowNode],
    edges: list[FlowEdge],
    processing_node_id: str,
) -> str | None:
    """Find the prompt template feeding ``processing_node_id``.

    Looks at the first edge targeting the processing node only; when several
    edges qualify the earliest one in ``edges`` wins.
    """
    return upstream_template(GraphIndex.build(nodes, edges), processing_node_id)


def build_prompt(template: str | None, input_text: str) -> str:
    """The text actually sent to the provider: the raw input when there is no template."""
    if not template:
        return input_text
    return substitute_input(template, input_text)
