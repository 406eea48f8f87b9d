"""
Filings Dashboard - Filterable, Paginated View over Regulatory Returns.

A small in-memory engine behind a returns filing portal. Filings are pulled
once from a data provider, narrowed by a fixed sequence of filter stages
(tab, fund type, status, period year, free-text search) and sliced into
fixed-size pages. Individual filings can be drilled into for an
extension-request workflow.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Core entities (Filing, FilterSpec, PageResult, etc.)
    - interfaces: Abstract protocols for all dependencies
    - filters: Concrete filter stage implementations
    - pipeline: Filter orchestration and pagination
    - session: Mutable dashboard state driving the pipeline
    - workflow: Extension-request flow
    - adapters: Infrastructure implementations (providers, loggers)
    - config: Configuration models and loaders

Example:
    >>> from filings_dashboard.bootstrap import create_dashboard
    >>> dashboard = create_dashboard()
    >>> dashboard.load()
    >>> dashboard.set_search_query("00101")
    >>> print(f"{len(dashboard.filtered_records)} filings on {dashboard.page_count} page(s)")

"""

import logging
from typing import Union

__version__ = "0.2.0"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO, fmt: str = LOG_FORMAT) -> None:
    """
    Route filings_dashboard log records to stderr.

    Nothing is printed until the application calls this; the library only
    creates module loggers. Level names such as "DEBUG"
    are accepted as well as numeric levels.

    Example:
        >>> import filings_dashboard
        >>> filings_dashboard.configure_logging("DEBUG")
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
    logging.basicConfig(level=level, format=fmt, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger(__name__).setLevel(level)
