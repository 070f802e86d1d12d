"""SQLite-backed stores handed to the flow executor."""

from nodeflow.flow.stores import CredentialStore, ProjectStore
from nodeflow.models.project import FlowConfig, Project
from server import api_key_db, project_db


class SqliteProjectStore(ProjectStore):
    def get_project(self, project_id: str) -> Project | None:
        return project_db.get_project(project_id)

    def get_flow_config(self, project_id: str) -> FlowConfig | None:
        return project_db.get_flow_config(project_id)


class SqliteCredentialStore(CredentialStore):
    def get_key(self, user_id: str, provider: str) -> str | None:
        stored = api_key_db.get_key(user_id, provider)
        return stored.api_key if stored else None
