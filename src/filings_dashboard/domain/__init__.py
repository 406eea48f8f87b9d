"""
Domain Layer - Core Business Entities and Value Objects.

This package contains the core domain model for the Filings Dashboard.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - Filing: One reporting obligation for a fund and period
    - SubFund: Per-sub-fund entry of a multi-fund extension request
    - ExtensionRequestData: Data collected by the extension form
    - Tab / FundType / ReturnStatus: Closed enumerations

Value Objects:
    - FilterResult: Result of a single filter stage
    - StageResult: Audit record of a stage run
    - PageResult: Filtered records plus page boundaries

Session State:
    - FilterSpec: Mutable filter specification of one dashboard session
"""

from filings_dashboard.domain.entities import (
    DocumentKind,
    ExtensionRequestData,
    ExtensionType,
    Filing,
    FundStructure,
    FundType,
    FundTypeFilter,
    PendingRequest,
    PendingRequestStatus,
    PendingRequestType,
    ReturnStatus,
    SubFund,
    SupportingDocument,
    Tab,
    TabContent,
)
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.domain.value_objects import FilterResult, PageResult, StageResult

__all__ = [
    "DocumentKind",
    "ExtensionRequestData",
    "ExtensionType",
    "Filing",
    "FilterResult",
    "FilterSpec",
    "FundStructure",
    "FundType",
    "FundTypeFilter",
    "PageResult",
    "PendingRequest",
    "PendingRequestStatus",
    "PendingRequestType",
    "ReturnStatus",
    "StageResult",
    "SubFund",
    "SupportingDocument",
    "Tab",
    "TabContent",
]
