from collections.abc import Iterable

from app.config.settings import Settings
from app.intake.exceptions import FileSizeError, FileTypeError
from app.intake.formats import file_extension

_MIB = 1024 * 1024


class FormatGuard:
    """Admits an upload by extension and size before any extraction work."""

    def __init__(self, allowed_extensions: Iterable[str], max_size_bytes: int) -> None:
        self._allowed = tuple(ext.lower() for ext in allowed_extensions)
        self._max_size_bytes = max_size_bytes

    @property
    def max_size_bytes(self) -> int:
        return self._max_size_bytes

    @classmethod
    def from_settings(cls, settings: Settings) -> "FormatGuard":
        return cls(settings.allowed_extensions, settings.max_upload_size_bytes)

    def check(self, filename: str, size_bytes: int) -> None:
        """Reject unsupported extensions first, then oversize documents.

        Raises:
            FileTypeError: if the extension is not in the allowed set.
            FileSizeError: if size_bytes exceeds the ceiling.
        """
        if file_extension(filename) not in self._allowed:
            raise FileTypeError(
                f"Invalid file type. Allowed types: {', '.join(self._allowed)}"
            )
        if size_bytes > self._max_size_bytes:
            raise FileSizeError(
                f"File too large. Maximum size: {self._format_limit()}"
            )

    def _format_limit(self) -> str:
        megabytes = self._max_size_bytes / _MIB
        if megabytes.is_integer():
            return f"{int(megabytes)}MB"
        return f"{megabytes:.2f}MB"
