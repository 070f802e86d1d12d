"""database initialization helpers."""

from server.api_key_db import init_db as init_api_key_db
from server.project_db import init_db as init_project_db


def init_all() -> None:
    """initialize all sqlite tables."""
    init_project_db()
    init_api_key_db()
