"""Tests for mdledger.source."""

from pathlib import Path

import pytest

from mdledger.domain.errors import SourceUnavailableError
from mdledger.source import read_ledger_lines


class TestReadLedgerLines:
    """Tests for read_ledger_lines."""

    def test_reads_lines_without_endings(self, tmp_path: Path) -> None:
        """Should return each line without its newline."""
        path = tmp_path / "03.md"
        path.write_text("## 1. 日常收支\r\n### 2023-03-01\n\n| a |\n", encoding="utf-8")

        assert read_ledger_lines(path) == ["## 1. 日常收支", "### 2023-03-01", "", "| a |"]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Should raise SourceUnavailableError for a missing file."""
        path = tmp_path / "missing.md"

        with pytest.raises(SourceUnavailableError) as exc_info:
            read_ledger_lines(path)

        assert exc_info.value.path == path
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory(self, tmp_path: Path) -> None:
        """Should raise SourceUnavailableError for a directory."""
        with pytest.raises(SourceUnavailableError):
            read_ledger_lines(tmp_path)

    def test_undecodable_file(self, tmp_path: Path) -> None:
        """Should raise SourceUnavailableError when the bytes are not valid text."""
        path = tmp_path / "binary.md"
        path.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(SourceUnavailableError, match="utf-8"):
            read_ledger_lines(path)
