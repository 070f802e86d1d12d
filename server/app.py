"""FastAPI application for building and running no-code AI flows."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from server import settings
from server.api_key_routes import router as api_key_router
from server.db import init_all
from server.errors import register_error_handlers
from server.execution_routes import router as execution_router
from server.logging_config import configure_logging
from server.project_routes import router as project_router
from server.provider_routes import router as provider_router

configure_logging()
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database tables on startup."""
    init_all()
    logger.info("nodeflow API %s ready, database at %s", VERSION, settings.DB_PATH)
    yield


app = FastAPI(
    title="Nodeflow API",
    description="API server for no-code AI flows: projects, provider keys and flow execution",
    version=VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# include routes
app.include_router(execution_router, prefix="/api")
app.include_router(project_router, prefix="/api")
app.include_router(api_key_router, prefix="/api")
app.include_router(provider_router, prefix="/api")


@app.get("/")
def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": VERSION,
        "endpoints": {
            "process": "/api/ai/process",
            "embedded": "/api/embedded/{project_id}/process",
            "projects": "/api/projects",
            "api_keys": "/api/api-keys",
            "providers": "/api/providers",
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
