class ExtractionError(Exception):
    """Raised when text cannot be extracted from a document."""


class EmptyDocumentError(Exception):
    """Raised when extraction succeeds but yields no text."""
