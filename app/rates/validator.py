"""Validates raw AI candidates and builds RateCandidate objects."""

import math
from datetime import date, datetime
from typing import Any

from app.rates.exceptions import ValidationError
from app.rates.models import RateCandidate, RateType, ValidationIssue

_RATE_TYPES = {t.value: t for t in RateType}


def validate_candidates(raw: list[Any]) -> list[RateCandidate]:
    """Check every candidate and build the batch, or reject it as a whole.

    All issues are collected before deciding, in candidate order with 1-based
    positions.

    Raises:
        ValidationError: if any candidate breaks any rule.
    """
    issues: list[ValidationIssue] = []
    candidates: list[RateCandidate] = []
    for position, item in enumerate(raw, start=1):
        candidate, reasons = _check_candidate(item)
        if candidate is None:
            issues.extend(ValidationIssue(position, reason) for reason in reasons)
        else:
            candidates.append(candidate)
    if issues:
        raise ValidationError(issues)
    return candidates


def _check_candidate(item: Any) -> tuple[RateCandidate | None, list[str]]:
    """Return the built candidate, or None with every rule it breaks."""
    if not isinstance(item, dict):
        return None, ["Expected an object"]

    reasons: list[str] = []
    rate_type = item.get("rate_type")
    if not isinstance(rate_type, str) or rate_type not in _RATE_TYPES:
        reasons.append("Invalid or missing rate_type")

    description = item.get("description")
    if not isinstance(description, str) or not description.strip():
        reasons.append("Missing or invalid description")

    cost = item.get("cost")
    if not _is_number(cost) or cost < 0:
        reasons.append("Invalid cost value")

    currency = item.get("currency")
    if not isinstance(currency, str) or len(currency) != 3:
        reasons.append("Invalid currency code")

    valid_start = parse_date(item.get("valid_start"))
    if valid_start is None:
        reasons.append("Invalid valid_start date")
    valid_end = parse_date(item.get("valid_end"))
    if valid_end is None:
        reasons.append("Invalid valid_end date")
    if valid_start is not None and valid_end is not None and valid_end < valid_start:
        reasons.append("valid_end is before valid_start")

    if reasons or valid_start is None or valid_end is None:
        return None, reasons
    return (
        RateCandidate(
            rate_type=_RATE_TYPES[rate_type],
            description=description.strip(),
            cost=float(cost),
            currency=currency,
            valid_start=valid_start,
            valid_end=valid_end,
        ),
        [],
    )


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # integers beyond float range
        return False


def parse_date(value: Any) -> date | None:
    """Parse an ISO calendar date (a datetime string is accepted and truncated)."""
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None
