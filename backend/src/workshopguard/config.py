"""Runtime configuration for the workshopguard adapters."""

from __future__ import annotations

import os
from dataclasses import dataclass

from workshopguard.capacity import CapacityReading


@dataclass(frozen=True)
class WorkshopConfig:
    """Adapter configuration.

    The capacity limits are the fallbacks used when a company has not saved
    its own workshop settings.
    """

    max_concurrent_jobs: int = 20
    max_jobs_per_technician: int = 5
    port: int = 8000
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> WorkshopConfig:
        """Create config from WORKSHOPGUARD_* environment variables.

        Raises:
            ValueError: If a numeric variable is not a positive integer
        """
        return cls(
            max_concurrent_jobs=_positive_int("WORKSHOPGUARD_MAX_CONCURRENT_JOBS", 20),
            max_jobs_per_technician=_positive_int(
                "WORKSHOPGUARD_MAX_JOBS_PER_TECHNICIAN", 5
            ),
            port=_positive_int("WORKSHOPGUARD_PORT", 8000),
            log_level=os.environ.get("WORKSHOPGUARD_LOG_LEVEL", "info").lower(),
        )

    def workshop_reading(self, current: int, max_jobs: int | None = None) -> CapacityReading:
        """Build a workshop-wide reading, falling back to the configured limit."""
        return CapacityReading(current=current, max=max_jobs or self.max_concurrent_jobs)

    def technician_reading(self, current: int, max_jobs: int | None = None) -> CapacityReading:
        """Build a per-technician reading, falling back to the configured limit."""
        return CapacityReading(
            current=current, max=max_jobs or self.max_jobs_per_technician
        )


def _positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value
