"""Capacity guard for a bounded workshop resource.

All functions take a CapacityReading supplied fresh by the caller. A reading
with max <= 0 is a configuration error the caller must surface before calling
in; it is not clamped here (the division raises ZeroDivisionError).

is_exceeded() implies is_approaching(), so callers wanting mutually exclusive
messaging must test is_exceeded() first, as warning_message() does.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from workshopguard.validation.types import Severity

APPROACHING_THRESHOLD = 0.8

FULL_CAPACITY_MESSAGE = "Workshop is at full capacity. Cannot accept new jobs."

TECHNICIAN_FULL_MESSAGE = (
    "Technician has reached maximum capacity ({max} jobs). "
    "Current active jobs: {current}"
)


class CapacityLevel(Enum):
    NORMAL = "normal"
    APPROACHING = "approaching"
    EXCEEDED = "exceeded"


@dataclass(frozen=True)
class CapacityReading:
    """A snapshot of resource usage.

    Attributes:
        current: Active jobs counted against the resource (may exceed max)
        max: Configured limit, must be > 0
    """

    current: int
    max: int


@dataclass(frozen=True)
class CapacityViolation:
    """A capacity threshold crossing with its classification."""

    level: CapacityLevel
    message: str

    @property
    def severity(self) -> Severity:
        """EXCEEDED blocks new work; APPROACHING only warns."""
        if self.level == CapacityLevel.EXCEEDED:
            return Severity.ERROR
        return Severity.WARNING

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level.value,
            "severity": self.severity.value,
            "message": self.message,
        }


@dataclass(frozen=True)
class CapacityUtilization:
    current: int
    max: int
    utilization_percentage: float
    available_capacity: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "current": self.current,
            "max": self.max,
            "utilization_percentage": self.utilization_percentage,
            "available_capacity": self.available_capacity,
        }


# =============================================================================
# Predicates
# =============================================================================


def is_exceeded(reading: CapacityReading) -> bool:
    return reading.current >= reading.max


def is_approaching(reading: CapacityReading) -> bool:
    return reading.current / reading.max >= APPROACHING_THRESHOLD


def classify(reading: CapacityReading) -> CapacityLevel:
    if is_exceeded(reading):
        return CapacityLevel.EXCEEDED
    if is_approaching(reading):
        return CapacityLevel.APPROACHING
    return CapacityLevel.NORMAL


# =============================================================================
# Messages
# =============================================================================


def warning_message(reading: CapacityReading) -> str | None:
    """Return the user-facing capacity warning, or None below the threshold."""
    if is_exceeded(reading):
        return FULL_CAPACITY_MESSAGE

    if is_approaching(reading):
        return (
            f"Workshop is approaching capacity ({reading.current}/{reading.max} jobs). "
            "Consider prioritizing existing work."
        )

    return None


def check_capacity(reading: CapacityReading) -> CapacityViolation | None:
    """Classify a reading and attach its warning, or None when normal."""
    message = warning_message(reading)
    if message is None:
        return None
    return CapacityViolation(level=classify(reading), message=message)


def utilization(reading: CapacityReading) -> CapacityUtilization:
    """Summarize a reading as a percentage and remaining headroom."""
    percentage = reading.current / reading.max * 100
    return CapacityUtilization(
        current=reading.current,
        max=reading.max,
        utilization_percentage=round(percentage, 2),
        available_capacity=max(0, reading.max - reading.current),
    )


def check_technician_capacity(reading: CapacityReading) -> CapacityViolation | None:
    """Check one technician's active jobs against the per-technician limit.

    A technician is either free to take a job or full; there is no
    approaching warning at this scope.
    """
    if not is_exceeded(reading):
        return None
    return CapacityViolation(
        level=CapacityLevel.EXCEEDED,
        message=TECHNICIAN_FULL_MESSAGE.format(max=reading.max, current=reading.current),
    )
