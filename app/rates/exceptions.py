from collections.abc import Sequence

from app.rates.models import ValidationIssue


class RateExtractionError(Exception):
    """Base exception for turning document text into rates."""


class AIProcessingError(RateExtractionError):
    """Raised when the completion call itself fails."""


class AIResponseParseError(RateExtractionError):
    """Raised when the completion succeeds but its payload is not a JSON array."""


class NoRatesFoundError(RateExtractionError):
    """Raised when the document yields no rate candidates."""


class ValidationError(RateExtractionError):
    """Aggregated rejection of a candidate batch.

    Carries every issue found, in candidate order.
    """

    def __init__(self, issues: Sequence[ValidationIssue]) -> None:
        self.issues = list(issues)
        super().__init__(
            "Validation errors: " + ", ".join(str(issue) for issue in self.issues)
        )
