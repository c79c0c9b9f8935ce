from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any


@dataclass
class RateRecord:
    """Represents a row from the rates table."""

    id: str
    agent_id: str
    rate_type: str
    description: str
    cost: float
    currency: str
    valid_start: date
    valid_end: date
    details: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
