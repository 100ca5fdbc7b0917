"""Fixed-size pagination over an ordered sequence."""

import math
from collections.abc import Sequence
from typing import TypeVar

from .entities.report import Page

T = TypeVar("T")


def paginate(items: Sequence[T], page_size: int, page_number: int) -> Page[T]:
    """Slice *items* into the requested 1-based page.

    There is always at least one page, even for an empty sequence, and
    *page_number* is clamped into ``[1, total_pages]``.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be a positive integer, got {page_size}")

    total_items = len(items)
    total_pages = max(1, math.ceil(total_items / page_size))
    effective = min(max(page_number, 1), total_pages)

    start = (effective - 1) * page_size
    return Page(
        items=list(items[start : start + page_size]),
        page_number=effective,
        total_pages=total_pages,
        total_items=total_items,
        page_size=page_size,
    )
