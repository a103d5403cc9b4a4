"""Table pagination – result pages, pagination metadata and the page window."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, TypeVar

__all__ = ["DEFAULT_DISTANCE", "Page", "PaginationMetadata", "page_window"]

T = TypeVar("T")

DEFAULT_DISTANCE = 5


@dataclasses.dataclass(frozen=True)
class PaginationMetadata:
    """Pagination facts reported by the data source for one render."""

    page_number: int
    page_size: int
    total_entries: int
    total_pages: int

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError("page_number must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")
        if self.total_entries < 0:
            raise ValueError("total_entries must be >= 0")
        if self.total_pages < 0:
            raise ValueError("total_pages must be >= 0")

    @classmethod
    def empty(cls, page_size: int = 10) -> "PaginationMetadata":
        """Metadata of an empty result set."""
        return cls(page_number=1, page_size=page_size, total_entries=0, total_pages=0)

    @classmethod
    def of(cls, total_entries: int, page_number: int, page_size: int) -> "PaginationMetadata":
        total_pages = math.ceil(total_entries / page_size) if page_size > 0 else 0
        return cls(
            page_number=page_number,
            page_size=page_size,
            total_entries=total_entries,
            total_pages=total_pages,
        )

    @classmethod
    def from_page(cls, page: "Page[Any]") -> "PaginationMetadata":
        return cls.of(page.total, page.page, page.size)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def first_entry(self) -> int:
        """1-based index of the first row on this page (0 when empty)."""
        if self.total_entries == 0:
            return 0
        return self.offset + 1

    @property
    def last_entry(self) -> int:
        return min(self.page_number * self.page_size, self.total_entries)

    @property
    def has_previous(self) -> bool:
        return self.page_number != 1

    @property
    def has_next(self) -> bool:
        return self.total_pages > 0 and self.page_number != self.total_pages


@dataclasses.dataclass
class Page(Generic[T]):
    """Offset-based page of results with computed navigation properties."""

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def metadata(self) -> PaginationMetadata:
        return PaginationMetadata.from_page(self)

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        """Return a new :class:`Page` with each item transformed by *fn*."""
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
        )

    @classmethod
    def of(cls, all_items: list[T], page: int, size: int) -> "Page[T]":
        """Build a :class:`Page` by slicing *all_items*."""
        start = (page - 1) * size
        return cls(
            items=all_items[start:start + size],
            total=len(all_items),
            page=page,
            size=size,
        )


def page_window(current_page: int, total_pages: int, distance: int = DEFAULT_DISTANCE) -> list[int]:
    """Page numbers to render as links around *current_page*.

    Near the first pages the window keeps a full ``2 * distance`` width;
    near the last page it stops at *total_pages*; elsewhere it spans
    ``current_page - distance`` to ``current_page + distance - 1``.
    With no pages at all the current page is still shown.

    >>> page_window(7, 20)
    [2, 3, 4, 5, 6, 7, 8, 9, 10, 11]
    """
    if total_pages == 0:
        return [current_page]

    start = max(1, current_page - distance)
    if current_page <= distance and 2 * distance <= total_pages:
        end = 2 * distance
    elif current_page + distance >= total_pages:
        end = total_pages
    else:
        end = current_page + distance - 1
    return list(range(start, end + 1))
