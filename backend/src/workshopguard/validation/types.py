"""Core types for the workshopguard validation system.

Every guard in the package reports problems with the same small value type:
- ValidationError: one independently-reportable defect ({field, message})
- ValidationResult: errors and warnings collected for one check, as handed to
  the API adapter

Failures are always returned, never raised.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(Enum):
    """Validation result severity.

    ERROR: Blocks the triggering action (write, transition, acceptance)
    WARNING: Informational, the action may proceed
    """

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationError:
    """A single validation failure.

    The {field, message} shape is shared verbatim between clients and servers,
    so no other keys are serialized.

    Attributes:
        field: Human-readable name of the field (or "status" for transitions)
        message: Complete, user-presentable sentence
    """

    field: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "message": self.message,
        }


@dataclass
class ValidationResult:
    """Result of validating a record or reading.

    Attributes:
        valid: True if no errors (warnings don't affect this)
        errors: Violations that block the action
        warnings: Violations that only inform
    """

    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[ValidationError]) -> "ValidationResult":
        return cls(valid=not errors, errors=list(errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }
