"""Client-side pagination over an already-fetched list."""

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from ..common.constants import PRODUCTS_PER_PAGE


@dataclass
class Page:
    """One window of items."""
    items: List[Any] = field(default_factory=list)
    number: int = 1
    total_pages: int = 0
    per_page: int = PRODUCTS_PER_PAGE

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 1


def parse_page_number(value: Optional[str]) -> int:
    """Parse a ?page= value, falling back to 1."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 1


def paginate(items: Sequence[Any], page: int = 1, per_page: int = PRODUCTS_PER_PAGE) -> Page:
    """
    Return the page-th window of `per_page` items.

    Out-of-range page numbers are clamped to the first or last page, so
    the slice is always within the list.

    Raises:
        ValueError: If per_page is not positive
    """
    if per_page <= 0:
        raise ValueError("per_page must be positive")

    total_pages = math.ceil(len(items) / per_page)
    number = min(max(page, 1), max(total_pages, 1))

    start = (number - 1) * per_page
    return Page(
        items=list(items[start:start + per_page]),
        number=number,
        total_pages=total_pages,
        per_page=per_page,
    )
