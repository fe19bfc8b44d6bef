from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar


T = TypeVar('T')

DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page request handed to storage."""

    number: int = 0
    size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if self.number < 0:
            raise ValueError('Page index must not be negative')
        if self.size < 1:
            raise ValueError('Page size must be at least one')

    @property
    def offset(self) -> int:
        return self.number * self.size


def page_request_for(page, size: int = DEFAULT_PAGE_SIZE) -> PageRequest:
    """Map a one-based page number from a request to a zero-based PageRequest.

    Missing, unparsable or non-positive values select the first page.
    """
    try:
        number = int(page) if page is not None else 1
    except (TypeError, ValueError):
        number = 1
    if number < 1:
        number = 1
    return PageRequest(number=number - 1, size=size)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a larger result set plus the size of the whole set."""

    items: List[T] = field(default_factory=list)
    number: int = 0
    size: int = DEFAULT_PAGE_SIZE
    total: int = 0

    @classmethod
    def of(cls, items: Sequence[T], request: PageRequest, total: int) -> 'Page[T]':
        return cls(items=list(items), number=request.number, size=request.size, total=total)

    @property
    def total_pages(self) -> int:
        if self.total <= 0:
            return 0
        return (self.total + self.size - 1) // self.size

    @property
    def current_page(self) -> int:
        """One-based page number for display."""
        return self.number + 1

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def is_first(self) -> bool:
        return self.number == 0

    @property
    def is_last(self) -> bool:
        return self.number + 1 >= self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    def page_numbers(self) -> List[int]:
        return list(range(1, self.total_pages + 1))

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
