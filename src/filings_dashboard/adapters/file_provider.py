"""
File Returns Provider.

Reads filings from a YAML file of the form:

    filings:
      - id: "1"
        entity_id: "101"
        fund_name: Healthcare Innovation Fund
        ...

The file is read once; later calls serve the cached set so order and
content stay stable for the session.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from filings_dashboard.domain.entities import Filing
from filings_dashboard.resilience.error_handler import ProviderError
from filings_dashboard.validation.filing_validator import FilingValidator

logger = logging.getLogger(__name__)


class FileReturnsProvider:
    """Filing provider backed by a YAML file."""

    def __init__(
        self,
        path: Union[str, Path],
        validator: Optional[FilingValidator] = None,
    ) -> None:
        """
        Initialize file provider.

        Args:
            path: YAML file holding a top-level 'filings' list
            validator: Filing-set validator (defaults to FilingValidator)
        """
        self.path = Path(path)
        self.validator = validator or FilingValidator()
        self._filings: Optional[List[Filing]] = None
        self._by_id: Dict[str, Filing] = {}

    def list_all(self) -> List[Filing]:
        """
        Get all filings from the file.

        Raises:
            ProviderError: If the file cannot be read, parsed or validated
        """
        if self._filings is None:
            self._filings = self._load()
            self._by_id = {f.id: f for f in self._filings}
        return list(self._filings)

    def get_by_id(self, filing_id: str) -> Optional[Filing]:
        """Get a filing, or None if the file has no such id."""
        self.list_all()
        return self._by_id.get(filing_id)

    def reload(self) -> None:
        """Drop the cached set; the next read goes back to the file."""
        self._filings = None
        self._by_id = {}

    def _load(self) -> List[Filing]:
        raw = self._read_yaml()
        entries = raw.get("filings") if isinstance(raw, dict) else None
        if not isinstance(entries, list):
            raise ProviderError(f"{self.path}: expected a top-level 'filings' list")

        filings: List[Filing] = []
        for index, entry in enumerate(entries):
            try:
                filings.append(Filing.model_validate(self._normalize(entry)))
            except PydanticValidationError as e:
                raise ProviderError(f"{self.path}: filing #{index} is invalid: {e}") from e

        result = self.validator.validate(filings)
        if not result.is_valid:
            raise ProviderError(f"{self.path}: {'; '.join(result.errors)}")

        logger.info(f"Loaded {len(filings)} filings from {self.path}")
        return filings

    def _read_yaml(self) -> Any:
        try:
            with open(self.path, encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except OSError as e:
            raise ProviderError(f"Cannot read filings file {self.path}: {e}") from e
        except yaml.YAMLError as e:
            raise ProviderError(f"Cannot parse filings file {self.path}: {e}") from e

    @staticmethod
    def _normalize(entry: Any) -> Any:
        # YAML turns unquoted numeric ids into ints
        if isinstance(entry, dict):
            entry = dict(entry)
            for key in ("id", "entity_id"):
                if isinstance(entry.get(key), int):
                    entry[key] = str(entry[key])
        return entry
