from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from petclinic.domain.errors import Errors, NOT_FOUND
from petclinic.domain.pagination import DEFAULT_PAGE_SIZE, Page, page_request_for


class SearchOutcome:
    """What the caller should show after an owner search."""

    NOT_FOUND = 'not_found'
    SINGLE_MATCH = 'single_match'
    LIST = 'list'

    ALL = (NOT_FOUND, SINGLE_MATCH, LIST)


@dataclass(frozen=True)
class OwnerSearchResult:
    outcome: str
    last_name: str
    page: Optional[Page] = None
    owner: Any = None

    @property
    def current_page(self) -> int:
        return self.page.current_page if self.page is not None else 1

    @property
    def total_pages(self) -> int:
        return self.page.total_pages if self.page is not None else 0

    @property
    def total_items(self) -> int:
        return self.page.total if self.page is not None else 0

    @property
    def redirect_to(self) -> Optional[str]:
        if self.outcome != SearchOutcome.SINGLE_MATCH:
            return None
        return f'/owners/{self.owner.id}'


def search_owners(
    repository,
    last_name: Optional[str],
    page=None,
    errors: Optional[Errors] = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> OwnerSearchResult:
    """Resolve a last-name prefix into zero, one or many owners.

    An empty prefix matches every owner. The single-match shortcut looks at
    the total number of matches, not at the size of the requested page.
    A ``notFound`` error is recorded on ``last_name`` when nothing matches.
    """
    prefix = last_name or ''
    request = page_request_for(page, page_size)
    results = repository.find_by_last_name_starting_with(prefix, request)

    if results.total == 0:
        if errors is not None:
            errors.reject_value('last_name', NOT_FOUND)
        return OwnerSearchResult(outcome=SearchOutcome.NOT_FOUND, last_name=prefix, page=results)

    if results.total == 1:
        if not results.items:
            # Requested page lies past the only match.
            results = repository.find_by_last_name_starting_with(prefix, page_request_for(1, page_size))
        return OwnerSearchResult(
            outcome=SearchOutcome.SINGLE_MATCH,
            last_name=prefix,
            page=results,
            owner=results.items[0],
        )

    return OwnerSearchResult(outcome=SearchOutcome.LIST, last_name=prefix, page=results)
