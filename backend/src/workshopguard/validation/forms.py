"""Compound form validators.

Each validator accepts one partial record for a business form (any field may be
missing, since the user may not have filled everything in yet) and returns an
ordered list of ValidationError, possibly empty.

Validation is fail-slow: every field is checked in its declared order and every
violation is collected, so the caller can show all problems at once.

Available forms:
- intake: Workshop intake of a job's equipment
- delivery: Scheduling a delivery back to the customer
- return: Handing equipment back against a customer signature
- workshop_settings: Optional capacity and pricing overrides
- equipment_dates: Purchase/warranty/installation date ordering
"""

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Callable, Mapping

from workshopguard.validation.primitives import (
    parse_date,
    validate_date,
    validate_number_range,
    validate_required,
)
from workshopguard.validation.types import ValidationError

FormValidator = Callable[..., list[ValidationError]]


# =============================================================================
# Intake / Delivery / Return
# =============================================================================


def validate_intake_form(data: Mapping[str, Any]) -> list[ValidationError]:
    """Validate the workshop intake form."""
    errors: list[ValidationError] = []

    job_id_error = validate_required(data.get("job_id"), "Job ID")
    if job_id_error:
        errors.append(job_id_error)

    issue_error = validate_required(data.get("reported_issue"), "Reported Issue")
    if issue_error:
        errors.append(issue_error)

    return errors


def validate_delivery_form(
    data: Mapping[str, Any],
    now: datetime | None = None,
) -> list[ValidationError]:
    """Validate the delivery scheduling form.

    The delivery date may not lie in the past. "Past" is measured against
    `now`, which defaults to the current UTC time; pass a fixed value to get
    a repeatable result.
    """
    errors: list[ValidationError] = []
    if now is None:
        now = datetime.now(timezone.utc)

    delivery_date = data.get("delivery_date")
    date_error = validate_required(delivery_date, "Delivery Date")
    if date_error is None:
        date_error = validate_date(delivery_date, "Delivery Date", min_date=now)
    if date_error:
        errors.append(date_error)

    technician_error = validate_required(
        data.get("delivery_technician_id"), "Delivery Technician"
    )
    if technician_error:
        errors.append(technician_error)

    return errors


def validate_return_form(data: Mapping[str, Any]) -> list[ValidationError]:
    """Validate the equipment return form.

    The signature is opaque (usually base64 image data); only its presence
    is checked.
    """
    errors: list[ValidationError] = []

    signature_error = validate_required(
        data.get("customer_signature"), "Customer Signature"
    )
    if signature_error:
        errors.append(signature_error)

    return errors


# =============================================================================
# Workshop Settings
# =============================================================================

# (key, label, min, max) in declared order
WORKSHOP_SETTING_RANGES: tuple[tuple[str, str, int, int], ...] = (
    ("max_concurrent_jobs", "Max Concurrent Jobs", 1, 1000),
    ("max_jobs_per_technician", "Max Jobs Per Technician", 1, 100),
    ("default_estimated_repair_hours", "Default Estimated Repair Hours", 1, 1000),
    ("default_pickup_delivery_fee", "Default Pickup/Delivery Fee", 0, 10000),
)


def validate_workshop_settings(data: Mapping[str, Any]) -> list[ValidationError]:
    """Validate workshop settings overrides.

    Every field is optional; an absent field keeps its default and produces
    no violation. A present value must be an int or float (not a bool).
    """
    errors: list[ValidationError] = []

    for key, label, minimum, maximum in WORKSHOP_SETTING_RANGES:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(
                ValidationError(field=label, message=f"{label} must be a number")
            )
            continue
        range_error = validate_number_range(value, minimum, maximum, label)
        if range_error:
            errors.append(range_error)

    return errors


# =============================================================================
# Equipment Dates
# =============================================================================

# (key, label) of each date field, in declared order
EQUIPMENT_DATE_FIELDS: tuple[tuple[str, str], ...] = (
    ("purchase_date", "Purchase Date"),
    ("warranty_expiry", "Warranty Expiry"),
    ("installation_date", "Installation Date"),
)

# (later key, label, message): each must not precede purchase_date
EQUIPMENT_DATE_ORDERING: tuple[tuple[str, str, str], ...] = (
    (
        "warranty_expiry",
        "Warranty Expiry",
        "Warranty expiry date cannot be before purchase date",
    ),
    (
        "installation_date",
        "Installation Date",
        "Installation date cannot be before purchase date",
    ),
)


def validate_equipment_dates(data: Mapping[str, Any]) -> list[ValidationError]:
    """Validate the date fields of a customer equipment record.

    Missing dates are not errors. Present dates must parse, and warranty
    expiry and installation date must not precede the purchase date. An
    ordering rule is only evaluated when both of its dates parse.
    """
    errors: list[ValidationError] = []
    parsed: dict[str, datetime] = {}

    for key, label in EQUIPMENT_DATE_FIELDS:
        value = data.get(key)
        if value is None or value == "":
            continue
        format_error = validate_date(value, label)
        if format_error:
            errors.append(format_error)
        else:
            parsed[key] = parse_date(value)

    purchase = parsed.get("purchase_date")
    if purchase is None:
        return errors

    for key, label, message in EQUIPMENT_DATE_ORDERING:
        later = parsed.get(key)
        if later is not None and later < purchase:
            errors.append(ValidationError(field=label, message=message))

    return errors


# =============================================================================
# Lookup
# =============================================================================

FORM_VALIDATORS: Mapping[str, FormValidator] = MappingProxyType({
    "intake": validate_intake_form,
    "delivery": validate_delivery_form,
    "return": validate_return_form,
    "workshop_settings": validate_workshop_settings,
    "equipment_dates": validate_equipment_dates,
})

# Forms whose result depends on the current time
_CLOCKED_FORMS = frozenset({"delivery"})


def validate_form(
    name: str,
    data: Mapping[str, Any],
    now: datetime | None = None,
) -> list[ValidationError]:
    """Run the named form validator.

    Raises:
        KeyError: If no form is registered under `name`
    """
    validator = FORM_VALIDATORS[name]
    if name in _CLOCKED_FORMS:
        return validator(data, now=now)
    return validator(data)
