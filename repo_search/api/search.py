"""Protected API endpoints. Every route here requires a bearer session."""

import logging
from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from repo_search.api.dependencies import get_search_service, require_session
from repo_search.schemas.auth import ErrorResponse
from repo_search.schemas.search import RepositoryResponse, SearchResponse
from repo_search.services.auth import RequestContext
from repo_search.services.search import SearchService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    dependencies=[Depends(require_session)],
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)


@router.get(
    "/search",
    response_model=SearchResponse,
    tags=["Search"],
    summary="Search repositories by a query parameter",
)
async def search(
    context: Annotated[RequestContext, Depends(require_session)],
    search_service: Annotated[SearchService, Depends(get_search_service)],
    q: Annotated[str, Query(description="The query to search for")] = "cloudflare workers",
):
    """Search GitHub repositories on behalf of an authenticated user."""
    logger.debug(f"User {context.user_id} searching for {q!r}")
    repositories = await search_service.search(q)
    return SearchResponse(
        result=[RepositoryResponse.model_validate(asdict(repo)) for repo in repositories]
    )


@router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False,
)
async def not_found():
    """Unknown /api routes, reached only after authentication succeeds."""
    return PlainTextResponse("Not Found.", status_code=404)
