"""Primitive single-field validators.

Each validator takes one value (plus bounds, for range and date checks) and the
human-readable field name, and returns None when the value passes or a single
ValidationError when it does not. None of them raise for well-typed input: a
malformed value inside a well-typed argument (an unparseable date string, say)
is reported as a violation.
"""

import re
from datetime import date, datetime, time, timezone
from typing import Any

from workshopguard.validation.types import ValidationError


# =============================================================================
# Format Patterns
# =============================================================================

# Email: syntactic local@domain.tld sanity check only. It says nothing about
# deliverability, and some illegal addresses (e.g. "a..b@c.d") still match.
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$", re.IGNORECASE)

# Phone: digits, whitespace, "+", "-", "(" and ")" only. No normalization.
PHONE_PATTERN = re.compile(r"^[\d\s\-+()]+$")


# =============================================================================
# Validators
# =============================================================================


def validate_required(value: Any, field_name: str) -> ValidationError | None:
    """Fail when the value is None or an empty string."""
    if value is None or value == "":
        return ValidationError(field=field_name, message=f"{field_name} is required")
    return None


def validate_email(value: Any, field_name: str = "email") -> ValidationError | None:
    if not isinstance(value, str) or not EMAIL_PATTERN.match(value):
        return ValidationError(field=field_name, message="Invalid email format")
    return None


def validate_phone(value: Any, field_name: str = "phone") -> ValidationError | None:
    if not isinstance(value, str) or not PHONE_PATTERN.match(value):
        return ValidationError(field=field_name, message="Invalid phone number format")
    return None


def validate_number_range(
    value: float,
    minimum: float,
    maximum: float,
    field_name: str,
) -> ValidationError | None:
    """Fail when value falls outside the closed range [minimum, maximum]."""
    if value < minimum or value > maximum:
        return ValidationError(
            field=field_name,
            message=f"{field_name} must be between {minimum} and {maximum}",
        )
    return None


def validate_date(
    value: Any,
    field_name: str,
    min_date: date | datetime | None = None,
    max_date: date | datetime | None = None,
) -> ValidationError | None:
    """Validate that a value is a date and, optionally, within bounds.

    Only one failure is reported per call: a parse failure short-circuits the
    range checks, and the lower bound is checked before the upper bound.

    Args:
        value: ISO-8601 string, date or datetime
        field_name: Human-readable field name used in the message
        min_date: Earliest acceptable moment (inclusive), if any
        max_date: Latest acceptable moment (inclusive), if any

    Returns:
        None if valid, otherwise a ValidationError
    """
    parsed = parse_date(value)
    if parsed is None:
        return ValidationError(
            field=field_name,
            message=f"Invalid date format for {field_name}",
        )

    if min_date is not None and parsed < to_utc(min_date):
        return ValidationError(
            field=field_name,
            message=f"{field_name} cannot be before {_format_bound(min_date)}",
        )

    if max_date is not None and parsed > to_utc(max_date):
        return ValidationError(
            field=field_name,
            message=f"{field_name} cannot be after {_format_bound(max_date)}",
        )

    return None


# =============================================================================
# Date Helpers
# =============================================================================


def parse_date(value: Any) -> datetime | None:
    """Parse a value into an aware UTC datetime, or None if it is not a date.

    Plain dates become midnight UTC; naive datetimes are taken to be UTC.
    A moment that has no UTC equivalent inside the calendar (an offset
    pushing 0001-01-01 or 9999-12-31 out of range) is not a date either.
    """
    if isinstance(value, (date, datetime)):
        candidate = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            candidate = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    try:
        return to_utc(candidate)
    except (ValueError, OverflowError):
        return None


def to_utc(value: date | datetime) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime."""
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _format_bound(value: date | datetime) -> str:
    return value.strftime("%Y-%m-%d")
