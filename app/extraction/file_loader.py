from app.extraction.exceptions import ExtractionError
from app.intake.models import UploadedDocument


class FileLoader:
    """Reads the bytes of a staged document from disk."""

    def load(self, document: UploadedDocument) -> bytes:
        """Read document bytes from its staged path.

        Raises:
            ExtractionError: if the staged file is missing or unreadable.
        """
        try:
            return document.path.read_bytes()
        except OSError as exc:
            raise ExtractionError(
                f"Failed to read uploaded file {document.filename}: {exc}"
            ) from exc
