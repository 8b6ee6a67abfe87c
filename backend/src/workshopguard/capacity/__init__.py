"""Workshop capacity guard."""

from workshopguard.capacity.guard import (
    APPROACHING_THRESHOLD,
    FULL_CAPACITY_MESSAGE,
    TECHNICIAN_FULL_MESSAGE,
    CapacityLevel,
    CapacityReading,
    CapacityUtilization,
    CapacityViolation,
    check_capacity,
    check_technician_capacity,
    classify,
    is_approaching,
    is_exceeded,
    utilization,
    warning_message,
)

__all__ = [
    "APPROACHING_THRESHOLD",
    "FULL_CAPACITY_MESSAGE",
    "TECHNICIAN_FULL_MESSAGE",
    "CapacityLevel",
    "CapacityReading",
    "CapacityUtilization",
    "CapacityViolation",
    "check_capacity",
    "check_technician_capacity",
    "classify",
    "is_approaching",
    "is_exceeded",
    "utilization",
    "warning_message",
]
