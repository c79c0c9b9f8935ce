from pathlib import Path

import pytest

from app.extraction.exceptions import ExtractionError
from app.extraction.file_loader import FileLoader
from app.intake.formats import DocumentFormat
from app.intake.models import UploadedDocument


def _make_document(path: Path) -> UploadedDocument:
    return UploadedDocument(
        path=path,
        filename="rates.pdf",
        mime_type="application/pdf",
        size_bytes=17,
        format=DocumentFormat.PDF,
    )


class TestLoad:
    def test_returns_staged_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "staged.pdf"
        path.write_bytes(b"%PDF test content")

        result = FileLoader().load(_make_document(path))

        assert result == b"%PDF test content"

    def test_raises_extraction_error_when_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ExtractionError, match="rates.pdf"):
            FileLoader().load(_make_document(tmp_path / "missing.pdf"))
