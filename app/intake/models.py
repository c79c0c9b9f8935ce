from dataclasses import dataclass
from pathlib import Path

from app.intake.formats import DocumentFormat


@dataclass(frozen=True)
class IncomingUpload:
    """The document and form fields of one upload request."""

    filename: str
    content_type: str | None
    content: bytes
    agent_id: str | None = None

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class UploadedDocument:
    """A staged upload: the temporary file the pipeline reads from."""

    path: Path
    filename: str
    mime_type: str
    size_bytes: int
    format: DocumentFormat
