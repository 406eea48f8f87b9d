"""
Paginator - Page Boundaries over a Filtered Set.

An empty result still has one (empty) page. Page numbers are 1-based and
slices are half-open, so the last page may be short.
"""

from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 12


def page_count(total: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Number of pages for total items, never less than 1."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return max(1, math.ceil(total / page_size))


def clamp_page(page: int, pages: int) -> int:
    """Pull a page number back into [1, pages]."""
    return max(1, min(page, pages))


def page_slice(items: Sequence[T], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> List[T]:
    """Items visible on a 1-based page."""
    start = (page - 1) * page_size
    return list(items[start : start + page_size])
