"""Run a flow end to end.

Two entry points share the same pipeline:

- ``execute_direct``: the caller passes provider, model, key and template
  inline (quick test from the node panel).
- ``execute_project``: the caller names a project; its stored graph decides
  provider, model, template and, together with the owner's stored keys,
  the credential.

Both are single-pass: the first unmet precondition raises, otherwise one
provider call is made and its text returned.
"""

import logging
import time

from nodeflow.exceptions import InvalidConfiguration, NotFound, ValidationError
from nodeflow.flow.credentials import resolve_api_key
from nodeflow.flow.stores import CredentialStore, ProjectStore
from nodeflow.flow.templates import build_prompt, upstream_template
from nodeflow.models.execution import DirectExecutionRequest
from nodeflow.models.flow_graph import AIProcessingNode, FlowGraph
from nodeflow.providers.catalog import OPENAI, default_model
from nodeflow.providers.dispatcher import DEFAULT_TEMPERATURE, ProviderDispatcher
from nodeflow.providers.inference import infer_provider

logger = logging.getLogger(__name__)


def find_processing_node(graph: FlowGraph) -> AIProcessingNode:
    """The graph's ai-processing node; the first one if there are several."""
    candidates = graph.processing_nodes()
    if not candidates:
        raise InvalidConfiguration("Invalid AI configuration: no AI processing node found")
    if len(candidates) > 1:
        logger.warning(
            "graph has %d AI processing nodes, using %s",
            len(candidates),
            candidates[0].id,
        )
    return candidates[0]


class FlowExecutor:
    def __init__(
        self,
        dispatcher: ProviderDispatcher,
        projects: ProjectStore,
        credentials: CredentialStore,
    ) -> None:
        self.dispatcher = dispatcher
        self.projects = projects
        self.credentials = credentials

    async def execute_direct(self, request: DirectExecutionRequest) -> str:
        if not request.input:
            raise ValidationError("Input text is required")

        prompt = build_prompt(request.prompt_template, request.input)
        provider = request.provider or infer_provider(request.model)

        if not request.api_key:
            raise ValidationError("API key is required")

        return await self._dispatch(
            provider,
            request.model,
            prompt,
            request.temperature,
            request.api_key,
        )

    async def execute_project(self, project_id: str, input_text: str | None) -> str:
        if not input_text:
            raise ValidationError("Input text is required")

        project = self.projects.get_project(project_id)
        if project is None:
            raise NotFound(f"Project not found: {project_id}")

        config = self.projects.get_flow_config(project_id)
        if config is None:
            raise NotFound(f"AI configuration not found for project: {project_id}")

        return await self.execute_graph(config.graph, project.user_id, input_text)

    async def execute_graph(self, graph: FlowGraph, owner_id: str, input_text: str) -> str:
        """Run ``graph`` for ``input_text`` using ``owner_id``'s stored keys as fallback."""
        index = graph.index()
        processing_node = find_processing_node(graph)
        settings = processing_node.data

        model = settings.model or default_model(OPENAI)
        temperature = settings.temperature
        if temperature is None:
            temperature = DEFAULT_TEMPERATURE
        provider = settings.provider or infer_provider(model)

        api_key = resolve_api_key(processing_node, owner_id, provider, self.credentials)

        template = upstream_template(index, processing_node.id)
        prompt = build_prompt(template, input_text)

        return await self._dispatch(provider, model, prompt, temperature, api_key)

    async def _dispatch(
        self,
        provider: str,
        model: str | None,
        prompt: str,
        temperature: float | None,
        api_key: str,
    ) -> str:
        start_time = time.time()
        result = await self.dispatcher.dispatch(provider, model, prompt, temperature, api_key)
        latency_ms = (time.time() - start_time) * 1000
        logger.info("%s run finished in %.0f ms", provider, latency_ms)
        return result
