"""
Pagination arithmetic and previous/next link building.
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

from evently.utils.formatting import form_url_query

def skip_amount(page: Union[int, str], limit: int) -> int:
    """Number of rows to skip to reach ``page`` (1-based)."""
    return (int(page) - 1) * limit

def total_pages(count: int, limit: int) -> int:
    """Number of pages needed to show ``count`` rows, ``limit`` per page."""
    return math.ceil(count / limit)

@dataclass
class PaginationLinks:
    """State of a previous/next pagination control."""
    page: int
    total_pages: int
    has_previous: bool
    has_next: bool
    previous_url: Optional[str]
    next_url: Optional[str]

def build_pagination(
    page: Union[int, str],
    total: int,
    params: str = "",
    path: str = "/",
    url_param_name: Optional[str] = None,
) -> PaginationLinks:
    """
    Build the previous/next links for a paginated listing.

    The previous button is disabled on the first page and the next button on
    the last one; a disabled direction has no URL.

    Args:
        page: Current page, 1-based
        total: Total number of pages
        params: Current query string, preserved in the generated links
        path: Path of the listing page
        url_param_name: Query key carrying the page number, ``page`` by default

    Returns:
        PaginationLinks: Flags and URLs for both directions
    """
    current = int(page)
    key = url_param_name or "page"
    has_previous = current > 1
    has_next = current < total

    return PaginationLinks(
        page=current,
        total_pages=total,
        has_previous=has_previous,
        has_next=has_next,
        previous_url=form_url_query(params, key, str(current - 1), path) if has_previous else None,
        next_url=form_url_query(params, key, str(current + 1), path) if has_next else None,
    )
