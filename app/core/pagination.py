"""Pagination and list-filter helpers for list endpoints."""


from fastapi import Query
from pydantic import BaseModel


class PaginationParams:
    """FastAPI dependency for `?page=1&limit=20&sort=createdAt&order=desc`."""

    def __init__(
        self,
        page: int = Query(default=1, ge=1, description="Page number (1-based)"),
        limit: int = Query(default=20, ge=1, le=200, description="Items per page"),
        sort: str = Query(default="created_at", description="Sort field (snake_case or camelCase)"),
        order: str = Query(default="desc", pattern="^(asc|desc)$", description="Sort order"),
    ):
        self.page = page
        self.limit = limit
        self.sort = _to_snake(sort)
        self.order = order

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    pages: int

    model_config = {"populate_by_name": True}


def _to_snake(name: str) -> str:
    """``createdAt`` -> ``created_at`` so the UI can sort by the names it receives."""
    out: list[str] = []
    for ch in name:
        if ch.isupper():
            out.append("_")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out).lstrip("_")


def parse_id_list(raw: str | None) -> list[str] | None:
    """Split a comma-separated ``?ids=`` value; blank entries are dropped."""
    if raw is None:
        return None
    return [part.strip() for part in raw.split(",") if part.strip()]
