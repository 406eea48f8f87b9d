"""
Filter Pipeline - Main Orchestrator.

The FilterPipeline runs the filter stages in their fixed order over the
full filing set and derives page boundaries over the survivors. It does
no I/O and never mutates the filings or the FilterSpec it is given.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Dict, List, Optional, Sequence, Tuple

from filings_dashboard.domain.entities import Filing
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.domain.value_objects import PageResult, StageResult
from filings_dashboard.filters import default_stages
from filings_dashboard.interfaces.audit_logger import AuditLogger
from filings_dashboard.interfaces.filter_stage import FilterStage
from filings_dashboard.pipeline.paginator import (
    DEFAULT_PAGE_SIZE,
    clamp_page,
    page_count,
    page_slice,
)

logger = logging.getLogger(__name__)


class FilterPipeline:
    """Applies filter stages and pagination to a filing set."""

    def __init__(
        self,
        filters: Optional[List[FilterStage]] = None,
        audit_logger: Optional[AuditLogger] = None,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            filters: Ordered filter stages (defaults to the standard five)
            audit_logger: Optional audit trail sink
        """
        self.filters = filters if filters is not None else default_stages()
        self.audit_logger = audit_logger

    def apply(
        self,
        all_records: Sequence[Filing],
        spec: FilterSpec,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> PageResult:
        """
        Filter, count pages and slice the requested page.

        Args:
            all_records: Full filing set in provider order
            spec: Current filter selection
            page_size: Filings per page

        Returns:
            PageResult; current_page is spec.page clamped to the page count
        """
        if self.audit_logger:
            self.audit_logger.set_correlation_id(str(uuid.uuid4()))

        filtered, audit_trail = self.run_stages(all_records, spec)

        pages = page_count(len(filtered), page_size)
        current = clamp_page(spec.page, pages)
        if current != spec.page:
            logger.debug(f"Clamped page {spec.page} to {current} of {pages}")

        return PageResult(
            filtered_records=filtered,
            page_count=pages,
            current_page=current,
            page_size=page_size,
            page_slice=page_slice(filtered, current, page_size),
            audit_trail=audit_trail,
        )

    def run_stages(
        self,
        all_records: Sequence[Filing],
        spec: FilterSpec,
    ) -> Tuple[List[Filing], List[StageResult]]:
        """Run every stage in order, each narrowing the previous output."""
        current = list(all_records)
        audit_trail: List[StageResult] = []

        for stage in self.filters:
            stage_result, current = self._execute_stage(stage, current, spec)
            audit_trail.append(stage_result)

        logger.debug(
            f"Filtered {len(all_records)} filings down to {len(current)} "
            f"(tab={spec.tab.value})"
        )
        return current, audit_trail

    def _execute_stage(
        self,
        stage: FilterStage,
        filings: List[Filing],
        spec: FilterSpec,
    ) -> Tuple[StageResult, List[Filing]]:
        """Execute a single filter stage."""
        stage_start = time.perf_counter()

        if self.audit_logger:
            self.audit_logger.log_stage_start(stage.name, len(filings))

        filter_result = stage.apply(filings, spec)

        stage_duration = time.perf_counter() - stage_start

        by_id: Dict[str, Filing] = {f.id: f for f in filings}

        if self.audit_logger:
            for filing_id, reason in filter_result.rejection_reasons.items():
                filing = by_id.get(filing_id)
                if filing:
                    self.audit_logger.log_filing_filtered(filing, stage.name, reason)
            self.audit_logger.log_stage_end(
                stage.name, filter_result.passed_count, stage_duration
            )

        stage_result = StageResult(
            stage_name=stage.name,
            input_count=len(filings),
            output_count=filter_result.passed_count,
            duration_seconds=stage_duration,
            filtered_ids=filter_result.rejected_ids,
            filter_reasons=filter_result.rejection_reasons,
        )

        # Only ids the stage was given may survive it
        passed = [by_id[i] for i in filter_result.passed_ids if i in by_id]

        return stage_result, passed
