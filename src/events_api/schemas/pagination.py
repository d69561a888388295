"""Pagination schemas for page-number pagination."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

MAX_PAGE_SIZE = 100


class Paging(BaseModel):
    """Page request. The repository layer turns it into offset/limit."""

    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of results."""

    items: list[T]
    page_number: int
    page_size: int
