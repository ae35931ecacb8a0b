"""Repository search schemas."""

from pydantic import BaseModel, ConfigDict


class RepositoryResponse(BaseModel):
    """Single repository search hit."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    description: str | None
    stars: int
    url: str


class SearchResponse(BaseModel):
    """Search response envelope."""

    success: bool = True
    result: list[RepositoryResponse]
