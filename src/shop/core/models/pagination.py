"""Pagination parameters for list queries."""

from pydantic import BaseModel, Field

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0


class PageRequest(BaseModel):
    """A bounded "skip offset, take limit" request."""

    limit: int
    offset: int


class PaginationDto(BaseModel):
    """Query parameters accepted by list endpoints."""

    limit: int | None = Field(default=None, gt=0, description="Page size")
    offset: int | None = Field(default=None, ge=0, description="Rows to skip")

    def normalize(self) -> PageRequest:
        return normalize(self.limit, self.offset)


def normalize(limit: int | None = None, offset: int | None = None) -> PageRequest:
    """Fill in the defaults for absent pagination values.

    Validation (positive limit, non-negative offset) happens in PaginationDto.
    No upper bound is applied to `limit`.
    """
    return PageRequest(
        limit=DEFAULT_LIMIT if limit is None else limit,
        offset=DEFAULT_OFFSET if offset is None else offset,
    )
