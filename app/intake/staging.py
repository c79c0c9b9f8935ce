import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from app.intake.formats import resolve_format
from app.intake.models import IncomingUpload, UploadedDocument
from app.logging.logger import Log


class DocumentStager:
    """Writes an admitted upload to a temporary file and owns its release."""

    def __init__(self, upload_dir: Path | None = None) -> None:
        self._upload_dir = upload_dir

    @contextmanager
    def stage(self, upload: IncomingUpload) -> Iterator[UploadedDocument]:
        """Yield the staged document; the file is deleted when the block exits.

        The temporary file is removed exactly once on every exit path. A failed
        removal is logged as a warning and never replaces the block's outcome.
        """
        fmt = resolve_format(upload.filename, upload.content_type)
        if self._upload_dir is not None:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            prefix="rates-",
            suffix=fmt.extension,
            dir=self._upload_dir,
            delete=False,
        ) as handle:
            path = Path(handle.name)
            try:
                handle.write(upload.content)
            except OSError:
                handle.close()
                self._release(path)
                raise
        Log.debug(f"Staged {upload.filename} at {path}")

        try:
            yield UploadedDocument(
                path=path,
                filename=upload.filename,
                mime_type=fmt.mime_type,
                size_bytes=upload.size_bytes,
                format=fmt,
            )
        finally:
            self._release(path)

    @staticmethod
    def _release(path: Path) -> None:
        try:
            path.unlink()
            Log.debug(f"Removed staged file {path}")
        except OSError as exc:
            Log.warning(f"Failed to clean up uploaded file {path}: {exc}")
