"""Turn errors into ``{"error": message}`` JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from nodeflow.exceptions import FlowError

logger = logging.getLogger(__name__)


async def flow_error_handler(request: Request, error: FlowError) -> JSONResponse:
    level = logging.ERROR if error.status_code >= 500 else logging.WARNING
    logger.log(
        level,
        "%s %s failed with %s (%d): %s",
        request.method,
        request.url.path,
        type(error).__name__,
        error.status_code,
        error.message,
    )
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


async def request_validation_handler(
    request: Request,
    error: RequestValidationError,
) -> JSONResponse:
    """Schema errors in the request body become 400s like every other bad request."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ()) if part != "body")
        problems.append(f"{location}: {item.get('msg')}" if location else str(item.get("msg")))
    message = "Invalid request"
    if problems:
        message = f"Invalid request: {'; '.join(problems)}"
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FlowError, flow_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
