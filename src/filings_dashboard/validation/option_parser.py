"""
Option Parser - Turn Presentation-Layer Options into Typed Values.

The presentation layer sets filter options by name with loosely typed
values. Recognized names:
    tab, fundType, statuses, periodYears, searchQuery, page
(snake_case spellings are accepted too).

Design Notes:
    - Unknown tab names fall back to reports, never an error
    - Unknown option names and fund types fail fast with ValidationError
    - Year selections are kept as given; a value that is not a year
      simply matches no filing
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Set

from filings_dashboard.domain.entities import FundTypeFilter, Tab

logger = logging.getLogger(__name__)

RECOGNIZED_OPTIONS = ("tab", "fundType", "statuses", "periodYears", "searchQuery", "page")

OPTION_ALIASES: Dict[str, str] = {
    "tab": "tab",
    "fundType": "fund_type",
    "fund_type": "fund_type",
    "statuses": "statuses",
    "status": "statuses",
    "periodYears": "period_years",
    "period_years": "period_years",
    "periodYear": "period_years",
    "searchQuery": "search_query",
    "search_query": "search_query",
    "page": "page",
}


class ValidationError(Exception):
    """Raised when a filter option cannot be accepted."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class OptionParser:
    """Parses filter options set by name."""

    def canonical_name(self, name: str) -> str:
        try:
            return OPTION_ALIASES[name]
        except KeyError:
            raise ValidationError(
                f"Unknown filter option {name!r}. Supported: {', '.join(RECOGNIZED_OPTIONS)}",
                field=name,
            ) from None

    def parse(self, name: str, value: Any) -> Any:
        """Parse one option into the type its setter expects."""
        field = self.canonical_name(name)
        parser = getattr(self, f"parse_{field}")
        return parser(value)

    def parse_all(self, options: Dict[str, Any]) -> Dict[str, Any]:
        """Parse every option, collecting all errors before raising."""
        parsed: Dict[str, Any] = {}
        errors = []
        for name, value in options.items():
            try:
                parsed[self.canonical_name(name)] = self.parse(name, value)
            except ValidationError as e:
                errors.append(e.message)
        if errors:
            message = "; ".join(errors)
            logger.error(f"Filter option validation failed: {message}")
            raise ValidationError(message)
        return parsed

    def parse_tab(self, value: Any) -> Tab:
        return Tab.parse(value)

    def parse_fund_type(self, value: Any) -> FundTypeFilter:
        if isinstance(value, FundTypeFilter):
            return value
        key = str(value).strip().lower()
        try:
            return FundTypeFilter(key)
        except ValueError:
            supported = ", ".join(f.value for f in FundTypeFilter)
            raise ValidationError(
                f"Fund type {value!r} not supported. Supported: {supported}",
                field="fund_type",
            ) from None

    def parse_statuses(self, value: Any) -> Set[str]:
        return {str(v).strip() for v in self._as_iterable(value, "statuses") if str(v).strip()}

    def parse_period_years(self, value: Any) -> Set[str]:
        return {str(v).strip() for v in self._as_iterable(value, "period_years") if str(v).strip()}

    def parse_search_query(self, value: Any) -> str:
        return "" if value is None else str(value)

    def parse_page(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValidationError(f"Page must be an integer, got {value!r}", field="page")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValidationError(
                f"Page must be an integer, got {value!r}", field="page"
            ) from None

    def _as_iterable(self, value: Any, field: str) -> Iterable[Any]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value] if value.strip() else []
        try:
            return list(value)
        except TypeError:
            raise ValidationError(
                f"{field} must be a collection, got {type(value).__name__}", field=field
            ) from None
