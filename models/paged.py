"""
models/paged.py
---------------
One page of a larger result set.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """
    A page of items plus the numbers needed to render prev/next buttons.

    `page` is zero-based. `has_next` holds while items remain after this page.
    """
    page: int
    page_size: int
    total_count: int
    items: list[T] = field(default_factory=list)

    @property
    def has_prev(self) -> bool:
        return self.page > 0

    @property
    def has_next(self) -> bool:
        return (self.page + 1) * self.page_size < self.total_count
