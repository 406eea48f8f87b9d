"""
Pipeline Package - Filter Orchestration and Pagination.

Components:
    - FilterPipeline: Runs the filter stages in order over all filings
    - paginator: Page count, clamping and slicing helpers
"""

from filings_dashboard.pipeline.filter_pipeline import FilterPipeline
from filings_dashboard.pipeline.paginator import (
    DEFAULT_PAGE_SIZE,
    clamp_page,
    page_count,
    page_slice,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "FilterPipeline",
    "clamp_page",
    "page_count",
    "page_slice",
]
