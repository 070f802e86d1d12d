"""Projects and the flow configuration stored for each of them."""

from pydantic import BaseModel, Field

from nodeflow.models.flow_graph import FlowGraph


class Project(BaseModel):
    """A user's no-code AI project."""

    model_config = {"extra": "forbid"}

    project_id: str
    user_id: str  # owner
    name: str
    description: str | None = None

    created_at: str
    updated_at: str


class ProjectCreate(BaseModel):
    """Request model for creating a project."""

    name: str = Field(min_length=1)
    description: str | None = None


class ProjectUpdate(BaseModel):
    """Request model for updating a project."""

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None


class FlowConfig(BaseModel):
    """The graph saved for a project, replaced wholesale on every save."""

    project_id: str
    graph: FlowGraph
    created_at: str
    updated_at: str


class ProjectExport(BaseModel):
    """Links a project owner can share to embed the flow elsewhere."""

    project_id: str
    public_url: str
    embed_code: str
    api_endpoint: str

    @classmethod
    def for_project(cls, project_id: str, base_url: str) -> "ProjectExport":
        base_url = base_url.rstrip("/")
        public_url = f"{base_url}/embed/{project_id}"
        embed_code = (
            f'<iframe src="{public_url}" width="100%" height="500" frameborder="0" '
            'allow="accelerometer; autoplay; encrypted-media; gyroscope; picture-in-picture" '
            "allowfullscreen></iframe>"
        )
        return cls(
            project_id=project_id,
            public_url=public_url,
            embed_code=embed_code,
            api_endpoint=f"{base_url}/api/embedded/{project_id}/process",
        )
