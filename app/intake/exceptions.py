class IntakeError(Exception):
    """Base exception for request-side problems with an uploaded document."""


class MissingFileError(IntakeError):
    """Raised when the request carries no document."""


class FileTypeError(IntakeError):
    """Raised when the document extension or format is not supported."""


class FileSizeError(IntakeError):
    """Raised when the document exceeds the configured size ceiling."""


class MissingAgentError(IntakeError):
    """Raised when no owning agent can be determined for the upload."""
