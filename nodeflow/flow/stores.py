"""Storage interfaces the executor reads from.

The server plugs in SQLite-backed implementations; the in-memory ones are
handy for tests and scripts.
"""

from nodeflow.models.project import FlowConfig, Project


class CredentialStore:
    """Protocol for looking up a user's stored provider key."""

    def get_key(self, user_id: str, provider: str) -> str | None:
        raise NotImplementedError


class ProjectStore:
    """Protocol for loading projects and their saved graphs."""

    def get_project(self, project_id: str) -> Project | None:
        raise NotImplementedError

    def get_flow_config(self, project_id: str) -> FlowConfig | None:
        raise NotImplementedError


class InMemoryCredentialStore(CredentialStore):
    """Keeps keys in a dict keyed by (user_id, provider)."""

    def __init__(self) -> None:
        self.keys: dict[tuple[str, str], str] = {}

    def put_key(self, user_id: str, provider: str, api_key: str) -> None:
        self.keys[(user_id, provider)] = api_key

    def get_key(self, user_id: str, provider: str) -> str | None:
        return self.keys.get((user_id, provider))


class InMemoryProjectStore(ProjectStore):
    """Keeps projects and flow configs in dicts."""

    def __init__(self) -> None:
        self.projects: dict[str, Project] = {}
        self.configs: dict[str, FlowConfig] = {}

    def add_project(self, project: Project) -> None:
        self.projects[project.project_id] = project

    def put_flow_config(self, config: FlowConfig) -> None:
        self.configs[config.project_id] = config

    def get_project(self, project_id: str) -> Project | None:
        return self.projects.get(project_id)

    def get_flow_config(self, project_id: str) -> FlowConfig | None:
        return self.configs.get(project_id)
