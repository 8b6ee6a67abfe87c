"""Equipment repair workflow guard."""

from workshopguard.workflow.transitions import (
    INITIAL_STATUS,
    JOB_STATUS_BY_EQUIPMENT_STATUS,
    TRANSITION_TABLE,
    EquipmentRepairStatus,
    JobStatus,
    allowed_transitions,
    check_transition,
    is_terminal,
    job_status_for,
    parse_status,
)

__all__ = [
    "INITIAL_STATUS",
    "JOB_STATUS_BY_EQUIPMENT_STATUS",
    "TRANSITION_TABLE",
    "EquipmentRepairStatus",
    "JobStatus",
    "allowed_transitions",
    "check_transition",
    "is_terminal",
    "job_status_for",
    "parse_status",
]
