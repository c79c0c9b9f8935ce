from dataclasses import dataclass
from datetime import date
from enum import Enum


class RateType(str, Enum):
    FLIGHT = "Flight"
    HOTEL = "Hotel"
    TOUR = "Tour"
    INSURANCE = "Insurance"
    TRANSFER = "Transfer"


@dataclass(frozen=True)
class RateCandidate:
    """A rate extracted from a document that passed validation."""

    rate_type: RateType
    description: str
    cost: float
    currency: str
    valid_start: date
    valid_end: date


@dataclass(frozen=True)
class ValidationIssue:
    """A single rule violation; position is 1-based."""

    position: int
    reason: str

    def __str__(self) -> str:
        return f"Rate {self.position}: {self.reason}"
