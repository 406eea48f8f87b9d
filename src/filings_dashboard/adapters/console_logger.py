"""
Console Audit Logger.

Prints one line per pipeline event, tagged with the run's correlation id:

    [14:02:11] [3f2a9c1e] [INFO ] Starting tab_filter with 12 filings
    [14:02:11] [3f2a9c1e] [DEBUG] 4 (Real Estate Investment Fund) filtered by tab_filter: ...
    [14:02:11] [3f2a9c1e] [INFO ] Completed tab_filter: 8 filings passed, 4 rejected (0.0001s)

Rejection counts per stage are kept for the current run and reset when a
new correlation id is set.
"""

from __future__ import annotations

import sys
from collections import Counter
from datetime import datetime
from typing import Any, Dict, Optional, TextIO

from filings_dashboard.domain.entities import Filing


class ConsoleAuditLogger:
    """Audit trail printed to a text stream."""

    def __init__(self, verbose: bool = True, stream: Optional[TextIO] = None) -> None:
        """
        Initialize console logger.

        Args:
            verbose: Also print stage starts and each rejected filing
            stream: Output stream (defaults to stdout at write time)
        """
        self._verbose = verbose
        self._stream = stream
        self._run_id = "--------"
        self._inputs: Dict[str, int] = {}
        self.rejections: Counter = Counter()

    def set_correlation_id(self, correlation_id: str) -> None:
        self._run_id = correlation_id[:8]
        self._inputs.clear()
        self.rejections.clear()

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._inputs[stage_name] = input_count
        if self._verbose:
            self._emit("INFO", f"Starting {stage_name} with {input_count} filings")

    def log_filing_filtered(self, filing: Filing, stage_name: str, reason: str) -> None:
        self.rejections[stage_name] += 1
        if self._verbose:
            self._emit(
                "DEBUG",
                f"{filing.id} ({filing.fund_name}) filtered by {stage_name}: {reason}",
            )

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        rejected = self._inputs.get(stage_name, output_count) - output_count
        self._emit(
            "INFO",
            f"Completed {stage_name}: {output_count} filings passed, "
            f"{rejected} rejected ({duration_seconds:.4f}s)",
        )

    def _emit(self, level: str, message: str) -> None:
        stamp = datetime.now().strftime("%H:%M:%S")
        print(
            f"[{stamp}] [{self._run_id}] [{level:5}] {message}",
            file=self._stream or sys.stdout,
        )
