"""Response shaping for guard results.

This is the server-side half of error presentation: violations are passed
through verbatim as {field, message} dicts, and the status code tells the
client whether the triggering action may proceed.
"""

from dataclasses import dataclass
from typing import Any

from workshopguard.validation import ValidationError, ValidationResult


@dataclass
class GuardResponse:
    """Response from a guard check."""

    result: ValidationResult
    status_code: int
    data: dict[str, Any] | None = None

    @property
    def success(self) -> bool:
        return self.result.valid

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"success": self.success}

        if self.data is not None:
            body["data"] = self.data

        # Empty error and warning lists are omitted
        for key, value in self.result.to_dict().items():
            if value != []:
                body[key] = value

        return body


def create_result_response(
    result: ValidationResult,
    data: dict[str, Any] | None = None,
    error_status: int = 422,
) -> GuardResponse:
    """Create a 200 response for a passing result, or `error_status` otherwise."""
    return GuardResponse(
        result=result,
        status_code=200 if result.valid else error_status,
        data=data,
    )


def create_error_response(
    errors: list[ValidationError],
    status_code: int = 422,
) -> GuardResponse:
    return create_result_response(
        ValidationResult.from_errors(errors), error_status=status_code
    )
