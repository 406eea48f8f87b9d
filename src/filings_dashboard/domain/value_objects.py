"""
Pipeline Outputs.

FilterResult is what one stage returns, StageResult is the audit record the
pipeline keeps for it, and PageResult is the whole run: survivors plus the
page window over them.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from filings_dashboard.domain.entities import Filing

# Rejection reasons: filing id -> reason string
RejectionReasonsDict = Dict[str, str]


class FilterResult(BaseModel):
    """Result of applying a single filter stage."""

    passed_ids: List[str] = Field(
        default_factory=list, description="Ids of filings that passed, in order"
    )
    rejected_ids: List[str] = Field(
        default_factory=list, description="Ids of rejected filings"
    )
    rejection_reasons: RejectionReasonsDict = Field(
        default_factory=dict, description="Filing id -> rejection reason"
    )

    model_config = {"frozen": True}

    @property
    def passed_count(self) -> int:
        return len(self.passed_ids)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected_ids)


class StageResult(BaseModel):
    """Result of a single filter stage for audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    duration_seconds: float
    filtered_ids: List[str] = Field(
        default_factory=list, description="Ids of filtered filings"
    )
    filter_reasons: RejectionReasonsDict = Field(
        default_factory=dict, description="Filing id -> rejection reason"
    )

    @property
    def reduction_ratio(self) -> float:
        """Calculate reduction ratio (0.0 = no reduction, 1.0 = all filtered)."""
        if self.input_count == 0:
            return 0.0
        return 1.0 - (self.output_count / self.input_count)


class PageResult(BaseModel):
    """Filtered filings together with the page boundaries over them."""

    filtered_records: List[Filing] = Field(default_factory=list)
    page_count: int = Field(default=1, ge=1)
    current_page: int = Field(default=1, ge=1)
    page_size: int = Field(default=12, ge=1)
    page_slice: List[Filing] = Field(default_factory=list)
    audit_trail: List[StageResult] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def total_count(self) -> int:
        return len(self.filtered_records)
