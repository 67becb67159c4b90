"""
Pagination of the visible node list.

Bad input is clamped rather than rejected: a page size below 1 is treated as
1, and a requested page outside [1, total_pages] is moved to the nearest
valid page. An empty list still has one (empty) page.
"""

import logging
import math
from typing import Sequence

from .types import Node, Page

logger = logging.getLogger(__name__)


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for `count` items; at least 1."""
    page_size = max(1, page_size)
    return max(1, math.ceil(count / page_size))


def clamp_page(requested_page: int, pages: int) -> int:
    return min(max(1, requested_page), max(1, pages))


def paginate(items: Sequence[Node], page_size: int, requested_page: int) -> Page:
    """
    Slice `items` to the requested page.

    Args:
        items: The filtered, ordered node list.
        page_size: Items per page. Values below 1 are clamped to 1.
        requested_page: 1-based page number. Clamped into range.

    Returns:
        Page: The slice plus the effective page number and page count.
    """
    if page_size < 1:
        logger.debug(f"Clamping page size {page_size} to 1")
        page_size = 1

    pages = total_pages(len(items), page_size)
    page = clamp_page(requested_page, pages)
    if page != requested_page:
        logger.debug(f"Clamped page {requested_page} to {page} of {pages}")

    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        page=page,
        total_pages=pages,
        page_size=page_size,
        total_items=len(items),
    )


class Paginator:
    """Fixed page size wrapper around `paginate`."""

    def __init__(self, page_size: int):
        self.page_size = max(1, page_size)

    def paginate(self, items: Sequence[Node], requested_page: int) -> Page:
        return paginate(items, self.page_size, requested_page)

    def total_pages(self, count: int) -> int:
        return total_pages(count, self.page_size)
