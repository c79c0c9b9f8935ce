from enum import Enum
from pathlib import PurePath

from app.intake.exceptions import FileTypeError


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    XLSX = "xlsx"

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @property
    def extension(self) -> str:
        return f".{self.value}"


_MIME_TYPES: dict[DocumentFormat, str] = {
    DocumentFormat.PDF: "application/pdf",
    DocumentFormat.DOCX: (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    ),
    DocumentFormat.XLSX: (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    ),
}

_BY_MIME_TYPE = {mime: fmt for fmt, mime in _MIME_TYPES.items()}
_BY_EXTENSION = {fmt.extension: fmt for fmt in DocumentFormat}


def file_extension(filename: str) -> str:
    """Lowercased extension including the dot, or '' when there is none."""
    return PurePath(filename or "").suffix.lower()


def resolve_format(filename: str, mime_type: str | None) -> DocumentFormat:
    """Pick the document format from the declared MIME type.

    Clients often declare a generic type (application/octet-stream) for
    office files, so an unrecognised MIME type falls back to the extension.

    Raises:
        FileTypeError: if neither the MIME type nor the extension is supported.
    """
    declared = (mime_type or "").split(";")[0].strip().lower()
    fmt = _BY_MIME_TYPE.get(declared) or _BY_EXTENSION.get(file_extension(filename))
    if fmt is None:
        raise FileTypeError(
            f"Unsupported file type: {declared or 'unknown'} ({filename})"
        )
    return fmt
