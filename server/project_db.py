"""SQLite storage for projects and their flow configurations."""

import sqlite3

from nodeflow.models.project import FlowConfig, Project
from server import settings


def _connect() -> sqlite3.Connection:
    settings.DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(settings.DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn


def init_db() -> None:
    with _connect() as conn:
        conn.execute(
            """
            create table if not exists projects (
                project_id text primary key,
                project_json text not null,
                user_id text not null,
                name text not null,
                created_at text not null,
                updated_at text not null
            )
            """
        )
        conn.execute(
            """
            create index if not exists idx_projects_user_id
            on projects(user_id)
            """
        )
        conn.execute(
            """
            create table if not exists flow_configs (
                project_id text primary key,
                config_json text not null,
                created_at text not null,
                updated_at text not null
            )
            """
        )
        conn.commit()


def create_project(project: Project) -> None:
    with _connect() as conn:
        conn.execute(
            """
            insert into projects (
                project_id,
                project_json,
                user_id,
                name,
                created_at,
                updated_at
            )
            values (?, ?, ?, ?, ?, ?)
            """,
            (
                project.project_id,
                project.model_dump_json(),
                project.user_id,
                project.name,
                project.created_at,
                project.updated_at,
            ),
        )
        conn.commit()


def update_project(project: Project) -> None:
    with _connect() as conn:
        conn.execute(
            """
            update projects
            set project_json = ?,
                name = ?,
                updated_at = ?
            where project_id = ?
            """,
            (
                project.model_dump_json(),
                project.name,
                project.updated_at,
                project.project_id,
            ),
        )
        conn.commit()


def get_project(project_id: str) -> Project | None:
    with _connect() as conn:
        row = conn.execute(
            "select project_json from projects where project_id = ?",
            (project_id,),
        ).fetchone()
    if not row:
        return None
    return Project.model_validate_json(row["project_json"])


def list_projects(user_id: str) -> list[Project]:
    with _connect() as conn:
        rows = conn.execute(
            """
            select project_json
            from projects
            where user_id = ?
            order by updated_at desc
            """,
            (user_id,),
        ).fetchall()
    return [Project.model_validate_json(row["project_json"]) for row in rows]


def delete_project(project_id: str) -> None:
    """delete a project together with its flow configuration."""
    with _connect() as conn:
        conn.execute("delete from flow_configs where project_id = ?", (project_id,))
        conn.execute("delete from projects where project_id = ?", (project_id,))
        conn.commit()


def upsert_flow_config(config: FlowConfig) -> None:
    """insert or replace the whole graph of a project."""
    with _connect() as conn:
        conn.execute(
            """
            insert into flow_configs (project_id, config_json, created_at, updated_at)
            values (?, ?, ?, ?)
            on conflict(project_id) do update set
                config_json = excluded.config_json,
                updated_at = excluded.updated_at
            """,
            (
                config.project_id,
                config.model_dump_json(by_alias=True),
                config.created_at,
                config.updated_at,
            ),
        )
        conn.commit()


def get_flow_config(project_id: str) -> FlowConfig | None:
    with _connect() as conn:
        row = conn.execute(
            "select config_json from flow_configs where project_id = ?",
            (project_id,),
        ).fetchone()
    if not row:
        return None
    return FlowConfig.model_validate_json(row["config_json"])
