"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from repo_search.api import auth, search
from repo_search.config import get_settings
from repo_search.database import init_db
from repo_search.exceptions import RepoSearchError, UpstreamError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


class ErrorJSONResponse(JSONResponse):
    """JSON response with the explicit charset used on error paths."""

    media_type = "application/json;charset=UTF-8"


def error_response(errors: str | list, status_code: int) -> ErrorJSONResponse:
    """Build the ``{success: false, errors: ...}`` envelope."""
    return ErrorJSONResponse({"success": False, "errors": errors}, status_code=status_code)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    # Startup: make sure users and users_sessions exist
    init_db()
    yield


app = FastAPI(
    title="Repo Search API",
    description="Session-authenticated proxy to the GitHub repository search API",
    version="1.0.0",
    docs_url="/",
    lifespan=lifespan,
)


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    """Pass the upstream body through verbatim."""
    return PlainTextResponse(exc.body, status_code=exc.status_code)


@app.exception_handler(RepoSearchError)
async def repo_search_error_handler(request: Request, exc: RepoSearchError):
    """Map domain errors to the JSON error envelope."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return error_response(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report request validation failures as 400 instead of 422."""
    errors = [{"loc": list(error["loc"]), "msg": error["msg"]} for error in exc.errors()]
    return error_response(errors, 400)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Plain-text 404 for unrouted paths, JSON envelope for everything else."""
    if exc.status_code == 404:
        return PlainTextResponse("Not Found.", status_code=404)
    return error_response(str(exc.detail), exc.status_code)


# Register routers; public auth routes must precede the guarded /api catch-all
app.include_router(auth.router)
app.include_router(search.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
