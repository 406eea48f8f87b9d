"""
Unit Tests for FileReturnsProvider.

Test Aspects Covered:
    ✅ Business Logic: YAML loading, id normalization, caching
    ✅ Error Handling: Missing file, bad YAML, invalid records, duplicates
"""

from __future__ import annotations

from pathlib import Path

import pytest

from filings_dashboard.adapters.file_provider import FileReturnsProvider
from filings_dashboard.interfaces.returns_provider import ReturnsProvider
from filings_dashboard.resilience.error_handler import ProviderError

VALID_FILINGS = """
filings:
  - id: "2"
    entity_id: "102"
    fund_name: Technology Growth Fund
    fund_type: private
    period: FY 2024
    status: available
    extensions_used: 1
    can_request_extension: true
  - id: "1"
    entity_id: "101"
    fund_name: Healthcare Innovation Fund
    fund_type: mutual
    period: Q4 2024
    status: available
"""


def write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "filings.yaml"
    path.write_text(content)
    return path


class TestFileReturnsProvider:
    """Test cases for FileReturnsProvider."""

    def test_satisfies_provider_protocol(self, tmp_path: Path) -> None:
        assert isinstance(FileReturnsProvider(tmp_path / "x.yaml"), ReturnsProvider)

    def test_loads_filings_in_file_order(self, tmp_path: Path) -> None:
        provider = FileReturnsProvider(write(tmp_path, VALID_FILINGS))

        filings = provider.list_all()

        assert [f.id for f in filings] == ["2", "1"]
        assert filings[0].extensions_remaining == 2

    def test_unquoted_numeric_ids_become_strings(self, sample_filings_path: Path) -> None:
        """
        SCENARIO: YAML with id: 1 and entity_id: 101 unquoted
        EXPECTED: Both loaded as strings
        """
        provider = FileReturnsProvider(sample_filings_path)

        filing = provider.get_by_id("1")

        assert filing is not None
        assert filing.entity_id == "101"

    def test_unknown_id_is_none(self, sample_filings_path: Path) -> None:
        assert FileReturnsProvider(sample_filings_path).get_by_id("404") is None

    def test_reads_file_once_until_reload(self, tmp_path: Path) -> None:
        """
        SCENARIO: File changes on disk after first read
        EXPECTED: Cached set served until reload()
        """
        path = write(tmp_path, VALID_FILINGS)
        provider = FileReturnsProvider(path)
        provider.list_all()

        path.write_text("filings: []\n")

        assert len(provider.list_all()) == 2
        provider.reload()
        assert provider.list_all() == []

    def test_missing_file(self, tmp_path: Path) -> None:
        provider = FileReturnsProvider(tmp_path / "missing.yaml")

        with pytest.raises(ProviderError, match="Cannot read"):
            provider.list_all()

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        provider = FileReturnsProvider(write(tmp_path, "filings: [unclosed\n"))

        with pytest.raises(ProviderError, match="Cannot parse"):
            provider.list_all()

    def test_missing_filings_list(self, tmp_path: Path) -> None:
        provider = FileReturnsProvider(write(tmp_path, "records: []\n"))

        with pytest.raises(ProviderError, match="'filings' list"):
            provider.list_all()

    def test_invalid_record(self, tmp_path: Path) -> None:
        """
        SCENARIO: Record using more extensions than allowed
        EXPECTED: ProviderError naming the record index
        """
        content = """
filings:
  - id: "1"
    entity_id: "101"
    fund_name: Over Budget Fund
    fund_type: mutual
    period: Q4 2024
    status: available
    extensions_used: 4
    max_extensions: 3
"""
        provider = FileReturnsProvider(write(tmp_path, content))

        with pytest.raises(ProviderError, match="filing #0 is invalid"):
            provider.list_all()

    def test_duplicate_ids(self, tmp_path: Path) -> None:
        content = VALID_FILINGS + """
  - id: "1"
    entity_id: "101"
    fund_name: Duplicate
    fund_type: mutual
    period: Q4 2024
    status: available
"""
        provider = FileReturnsProvider(write(tmp_path, content))

        with pytest.raises(ProviderError, match="Duplicate filing id"):
            provider.list_all()

    def test_warnings_do_not_fail_loading(self, sample_filings_path: Path) -> None:
        filings = FileReturnsProvider(sample_filings_path).list_all()

        assert [f.id for f in filings] == ["1", "8", "9", "20"]
