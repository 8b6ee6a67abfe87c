"""workshopguard validation system.

Two layers, both pure:
- Primitive validators: single-field checks (required, email, phone, range, date)
- Form validators: one structured record per business form, fail-slow

Usage:
    from workshopguard.validation import validate_intake_form

    errors = validate_intake_form({"job_id": "J-1"})
    if errors:
        ...  # hand the list to the presentation layer
"""

from workshopguard.validation.forms import (
    FORM_VALIDATORS,
    validate_delivery_form,
    validate_equipment_dates,
    validate_form,
    validate_intake_form,
    validate_return_form,
    validate_workshop_settings,
)
from workshopguard.validation.primitives import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    validate_date,
    validate_email,
    validate_number_range,
    validate_phone,
    validate_required,
)
from workshopguard.validation.types import (
    Severity,
    ValidationError,
    ValidationResult,
)

__all__ = [
    # Types
    "Severity",
    "ValidationError",
    "ValidationResult",
    # Primitives
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    "validate_date",
    "validate_email",
    "validate_number_range",
    "validate_phone",
    "validate_required",
    # Forms
    "FORM_VALIDATORS",
    "validate_delivery_form",
    "validate_equipment_dates",
    "validate_form",
    "validate_intake_form",
    "validate_return_form",
    "validate_workshop_settings",
]
