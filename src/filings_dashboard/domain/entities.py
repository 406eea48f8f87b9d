"""
Core Domain Entities.

This module defines the fundamental entities of the Filings Dashboard domain.
These entities represent the core concepts that the business logic operates on.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

# First run of four digits anywhere in a period label ("Q4 2024" -> "2024")
_YEAR_PATTERN = re.compile(r"\d{4}")


def normalize_status_label(label: str) -> str:
    """Fold a status label for case- and separator-insensitive comparison."""
    return re.sub(r"[\s_-]", "", label).lower()


class FundType(str, Enum):
    """Type of fund a filing belongs to."""

    MUTUAL = "mutual"
    PRIVATE = "private"


class FundTypeFilter(str, Enum):
    """Fund-type selection of the dashboard."""

    ALL = "all"
    MUTUAL = "mutual"
    PRIVATE = "private"

    def matches(self, fund_type: FundType) -> bool:
        if self is FundTypeFilter.ALL:
            return True
        return self.value == fund_type.value


class FundStructure(str, Enum):
    """Standalone fund or umbrella with sub-funds."""

    SINGLE = "single"
    MULTI = "multi"


class ReturnStatus(str, Enum):
    """Lifecycle status of a filing."""

    AVAILABLE = "available"
    PREPARED = "prepared"
    READY_TO_SUBMIT = "ready-to-submit"
    PROCESSED = "processed"
    RETURNED = "returned"
    WAIVED = "waived"
    OUTSTANDING = "outstanding"
    DEFERRED = "deferred"
    UNDER_REVIEW = "under-review"

    @property
    def normalized(self) -> str:
        return normalize_status_label(self.value)


class PendingRequestType(str, Enum):
    EXTENSION = "extension"
    WAIVER = "waiver"
    DEFERRAL = "deferral"


class PendingRequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ExtensionType(str, Enum):
    """Kind of relief requested for a filing or sub-fund."""

    TWO_MONTH = "2-month"
    THREE_MONTH = "3-month"
    WAIVER = "waiver"
    NONE = "none"


class DocumentKind(str, Enum):
    """Supporting documents accepted with an extension request."""

    COVER_LETTER = "cover_letter"
    AUDITOR_LETTER = "auditor_letter"
    OPERATOR_AFFIDAVIT = "operator_affidavit"
    ADMINISTRATOR_LETTER = "administrator_letter"
    LIQUIDATOR_REPORT = "liquidator_report"
    OTHER_DOCUMENTS = "other_documents"


class TabContent(BaseModel):
    """Heading shown above the filings list for a tab."""

    title: str
    description: str
    show_status_filter: bool

    model_config = {"frozen": True}


class Tab(str, Enum):
    """Top-level view partitioning filings by lifecycle stage."""

    ACTIVE = "active"
    SUBMITTED = "submitted"
    RETURNED = "returned"
    REPORTS = "reports"

    @classmethod
    def parse(cls, value: "Tab | str") -> "Tab":
        """
        Parse a tab name coming from the presentation layer.

        Unrecognized names fall back to REPORTS, which applies no
        row-level filtering.
        """
        if isinstance(value, Tab):
            return value
        key = str(value).strip().lower()
        if key == "reports-analytics":
            return cls.REPORTS
        try:
            return cls(key)
        except ValueError:
            return cls.REPORTS

    @property
    def content(self) -> TabContent:
        return _TAB_CONTENT.get(self, _PORTAL_CONTENT)


_PORTAL_CONTENT = TabContent(
    title="Returns Filing & Extension Management Portal",
    description="File your financial returns or request deadline extensions as needed.",
    show_status_filter=True,
)

_TAB_CONTENT: Dict[Tab, TabContent] = {
    Tab.ACTIVE: TabContent(
        title="Active Filings",
        description=(
            "Filings that are actively being worked on or pending action. "
            "Includes available, prepared, ready to submit, outstanding, "
            "and deferred filings."
        ),
        show_status_filter=True,
    ),
    Tab.SUBMITTED: TabContent(
        title="Submitted Filings",
        description=(
            "Filings that have been successfully processed by the authority. "
            "View your filing history and approved extensions."
        ),
        show_status_filter=False,
    ),
    Tab.RETURNED: TabContent(
        title="Returned Filings",
        description=(
            "Filings that were rejected or sent back by the authority requiring "
            "amendments. Review feedback and resubmit your filings."
        ),
        show_status_filter=False,
    ),
}


class PendingRequest(BaseModel):
    """An extension, waiver or deferral submitted but not yet resolved."""

    type: PendingRequestType
    status: PendingRequestStatus = PendingRequestStatus.PENDING

    model_config = {"frozen": True}


class Filing(BaseModel):
    """One reporting obligation of a fund for a given period."""

    id: str = Field(..., min_length=1, description="Filing identifier")
    entity_id: str = Field(..., description="Entity/fund identifier")
    fund_name: str = Field(..., description="Display name")
    fund_type: FundType
    fund_structure: Optional[FundStructure] = None
    parent_fund_name: Optional[str] = Field(
        default=None, description="Umbrella fund name for multi-fund structures"
    )
    period: str = Field(..., description="Reporting period label, e.g. 'Q4 2024'")
    period_description: str = ""
    due_date: str = ""
    due_date_description: str = ""
    status: ReturnStatus
    extensions_used: int = Field(default=0, ge=0)
    used_extension_days: int = Field(default=0, ge=0)
    max_extensions: int = Field(default=3, ge=0)
    extension_description: str = ""
    can_request_extension: bool = False
    is_urgent: bool = False
    pending_request: Optional[PendingRequest] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_extension_budget(self) -> "Filing":
        if self.extensions_used > self.max_extensions:
            raise ValueError(
                f"extensions_used={self.extensions_used} exceeds "
                f"max_extensions={self.max_extensions}"
            )
        if self.can_request_extension and self.extensions_used >= self.max_extensions:
            raise ValueError(
                "can_request_extension must be false once all extensions are used"
            )
        return self

    @property
    def period_year(self) -> Optional[str]:
        """First 4-digit run in the period label, if any."""
        match = _YEAR_PATTERN.search(self.period)
        return match.group(0) if match else None

    @property
    def extensions_remaining(self) -> int:
        return self.max_extensions - self.extensions_used

    @property
    def is_multi_fund(self) -> bool:
        return self.fund_structure == FundStructure.MULTI


class SubFund(BaseModel):
    """Sub-fund line of a multi-fund extension request."""

    id: str
    name: str
    description: str = ""
    current_filing_date: str = ""
    extension_type: ExtensionType = ExtensionType.NONE
    waiver_reason: Optional[str] = None
    extensions_used: int = Field(default=0, ge=0)
    used_extension_days: int = Field(default=0, ge=0)
    max_extensions: int = Field(default=3, ge=0)
    entity_id: str = ""


class SupportingDocument(BaseModel):
    """Reference to an uploaded supporting document."""

    file_name: str
    content_type: str = "application/pdf"
    size_bytes: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class ExtensionRequestData(BaseModel):
    """Everything the extension form collects before handoff."""

    extension_type: ExtensionType
    waiver_reason: Optional[str] = None
    sub_funds: Optional[List[SubFund]] = None
    documents: Dict[DocumentKind, SupportingDocument] = Field(default_factory=dict)
    additional_comments: Optional[str] = None
