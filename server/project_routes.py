"""API routes for projects, their flow graphs and export links."""

from fastapi import APIRouter, Depends

from nodeflow.exceptions import NotFound
from nodeflow.models.flow_graph import FlowGraph
from nodeflow.models.project import (
    FlowConfig,
    Project,
    ProjectCreate,
    ProjectExport,
    ProjectUpdate,
)
from nodeflow.utils.identifiers import generate_project_id, utc_timestamp
from server import settings
from server.deps import get_current_user
from server.project_db import (
    create_project as db_create_project,
    delete_project as db_delete_project,
    get_flow_config as db_get_flow_config,
    get_project as db_get_project,
    list_projects as db_list_projects,
    update_project as db_update_project,
    upsert_flow_config as db_upsert_flow_config,
)

router = APIRouter()


def _load_owned_project(project_id: str, user_id: str) -> Project:
    """load a project the user owns; other users' projects look missing."""
    project = db_get_project(project_id)
    if not project or project.user_id != user_id:
        raise NotFound(f"Project not found: {project_id}")
    return project


@router.get("/projects")
def list_projects(user_id: str = Depends(get_current_user)) -> list[Project]:
    """list the current user's projects, most recently updated first."""
    return db_list_projects(user_id)


@router.post("/projects", status_code=201)
def create_project(
    request: ProjectCreate,
    user_id: str = Depends(get_current_user),
) -> Project:
    now = utc_timestamp()
    project = Project(
        project_id=generate_project_id(),
        user_id=user_id,
        name=request.name,
        description=request.description,
        created_at=now,
        updated_at=now,
    )
    db_create_project(project)
    return project


@router.get("/projects/{project_id}")
def get_project(project_id: str, user_id: str = Depends(get_current_user)) -> Project:
    return _load_owned_project(project_id, user_id)


@router.patch("/projects/{project_id}")
def update_project(
    project_id: str,
    request: ProjectUpdate,
    user_id: str = Depends(get_current_user),
) -> Project:
    """update name and/or description; omitted fields keep their value."""
    existing = _load_owned_project(project_id, user_id)
    project = existing.model_copy(
        update={
            "name": request.name if request.name is not None else existing.name,
            "description": (
                request.description if request.description is not None else existing.description
            ),
            "updated_at": utc_timestamp(),
        }
    )
    db_update_project(project)
    return project


@router.delete("/projects/{project_id}")
def delete_project(project_id: str, user_id: str = Depends(get_current_user)) -> dict:
    """delete a project and its flow configuration."""
    _load_owned_project(project_id, user_id)
    db_delete_project(project_id)
    return {"deleted": project_id}


@router.get("/projects/{project_id}/config")
def get_flow_config(project_id: str, user_id: str = Depends(get_current_user)) -> FlowConfig:
    _load_owned_project(project_id, user_id)
    config = db_get_flow_config(project_id)
    if not config:
        raise NotFound(f"AI configuration not found for project: {project_id}")
    return config


@router.put("/projects/{project_id}/config")
def put_flow_config(
    project_id: str,
    graph: FlowGraph,
    user_id: str = Depends(get_current_user),
) -> FlowConfig:
    """save the project's graph, replacing the previous one entirely.

    Uses PUT for idempotent upsert, the canvas calls it on every save.
    """
    _load_owned_project(project_id, user_id)
    now = utc_timestamp()

    existing = db_get_flow_config(project_id)
    config = FlowConfig(
        project_id=project_id,
        graph=graph,
        created_at=existing.created_at if existing else now,
        updated_at=now,
    )
    db_upsert_flow_config(config)
    return config


@router.get("/projects/{project_id}/export")
def export_project(project_id: str, user_id: str = Depends(get_current_user)) -> ProjectExport:
    """public URL, iframe embed code and API endpoint for a project."""
    _load_owned_project(project_id, user_id)
    return ProjectExport.for_project(project_id, settings.PUBLIC_BASE_URL)
