"""Equipment repair lifecycle: statuses, transition table and guard.

The transition table is the single source of truth for which status changes
are legal. Neither the UI nor the API re-derives legality on its own; both
call check_transition().
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from workshopguard.validation.types import ValidationError


class EquipmentRepairStatus(Enum):
    """Lifecycle stage of one piece of equipment in workshop repair."""

    PENDING_INTAKE = "pending_intake"
    IN_TRANSIT = "in_transit"
    RECEIVED = "received"
    IN_REPAIR = "in_repair"
    REPAIR_COMPLETED = "repair_completed"
    READY_FOR_PICKUP = "ready_for_pickup"
    OUT_FOR_DELIVERY = "out_for_delivery"
    RETURNED = "returned"


class JobStatus(Enum):
    """Status of the work order that owns the equipment."""

    PENDING = "pending"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    ON_HOLD = "on_hold"


S = EquipmentRepairStatus

INITIAL_STATUS = S.PENDING_INTAKE

# Legal next statuses, in the order they are offered to the operator.
# PENDING_INTAKE -> RECEIVED skips IN_TRANSIT (walk-in intake?); kept as-is
# until product confirms it.
TRANSITION_TABLE: Mapping[EquipmentRepairStatus, tuple[EquipmentRepairStatus, ...]] = (
    MappingProxyType({
        S.PENDING_INTAKE: (S.IN_TRANSIT, S.RECEIVED),
        S.IN_TRANSIT: (S.RECEIVED,),
        S.RECEIVED: (S.IN_REPAIR,),
        S.IN_REPAIR: (S.REPAIR_COMPLETED, S.RECEIVED),  # failed repair, re-triage
        S.REPAIR_COMPLETED: (S.READY_FOR_PICKUP, S.OUT_FOR_DELIVERY),
        S.READY_FOR_PICKUP: (S.RETURNED,),
        S.OUT_FOR_DELIVERY: (S.RETURNED,),
        S.RETURNED: (),
    })
)

# Job status implied by each equipment status
JOB_STATUS_BY_EQUIPMENT_STATUS: Mapping[EquipmentRepairStatus, JobStatus] = (
    MappingProxyType({
        S.PENDING_INTAKE: JobStatus.PENDING,
        S.IN_TRANSIT: JobStatus.PENDING,
        S.RECEIVED: JobStatus.ASSIGNED,
        S.IN_REPAIR: JobStatus.IN_PROGRESS,
        S.REPAIR_COMPLETED: JobStatus.COMPLETED,
        S.READY_FOR_PICKUP: JobStatus.COMPLETED,
        S.OUT_FOR_DELIVERY: JobStatus.COMPLETED,
        S.RETURNED: JobStatus.COMPLETED,
    })
)

del S


def parse_status(value: Any) -> EquipmentRepairStatus | None:
    """Return the status for an enum member or its string value, else None."""
    try:
        return EquipmentRepairStatus(value)
    except ValueError:
        return None


def allowed_transitions(
    status: EquipmentRepairStatus | str,
) -> tuple[EquipmentRepairStatus, ...]:
    """Statuses reachable directly from `status` (empty for unknown values)."""
    current = parse_status(status)
    if current is None:
        return ()
    return TRANSITION_TABLE[current]


def is_terminal(status: EquipmentRepairStatus | str) -> bool:
    current = parse_status(status)
    return current is not None and not TRANSITION_TABLE[current]


def job_status_for(status: EquipmentRepairStatus | str) -> JobStatus | None:
    current = parse_status(status)
    if current is None:
        return None
    return JOB_STATUS_BY_EQUIPMENT_STATUS[current]


def check_transition(
    current: EquipmentRepairStatus | str,
    proposed: EquipmentRepairStatus | str,
) -> ValidationError | None:
    """Check whether `current` may move directly to `proposed`.

    Returns:
        None if the transition is legal, otherwise a ValidationError on the
        "status" field whose message lists the legal next statuses (or
        "none" for the terminal status).
    """
    current_status = parse_status(current)
    if current_status is None:
        return ValidationError(
            field="status",
            message=f"Invalid current status: {_label(current)}",
        )

    allowed = TRANSITION_TABLE[current_status]
    if parse_status(proposed) in allowed:
        return None

    valid = ", ".join(s.value for s in allowed) or "none"
    return ValidationError(
        field="status",
        message=(
            f"Cannot transition from {current_status.value} to {_label(proposed)}. "
            f"Valid transitions: {valid}"
        ),
    )


def _label(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
