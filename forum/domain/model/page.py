"""Paged result shared by every listing."""

import math
from typing import Generic, TypeVar

from pydantic import Field, computed_field

from forum.domain.model.common import DomainModel

T = TypeVar("T")


class Page(DomainModel, Generic[T]):
    """One page of a listing.

    A page past the end is empty but still reports the real total count.
    """

    items: list[T]
    page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    total_count: int = Field(ge=0)

    @computed_field
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @staticmethod
    def offset(page: int, page_size: int) -> int:
        """Number of rows to skip for the given page."""
        return (page - 1) * page_size
