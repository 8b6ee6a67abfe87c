"""Capacity CLI command: classify a reading."""

import click

from workshopguard.capacity import (
    CapacityLevel,
    check_capacity,
    check_technician_capacity,
    utilization,
)
from workshopguard.config import WorkshopConfig


@click.command()
@click.argument("current", type=click.IntRange(min=0))
@click.argument("maximum", metavar="[MAX]", type=click.IntRange(min=1), required=False)
@click.option(
    "--technician",
    is_flag=True,
    help="Check a single technician's load instead of the whole workshop.",
)
def capacity(current: int, maximum: int | None, technician: bool):
    """Classify CURRENT active jobs against a limit of MAX.

    MAX defaults to the configured workshop limit, or the per-technician
    limit with --technician.
    """
    config = WorkshopConfig.from_env()
    if technician:
        reading = config.technician_reading(current, maximum)
        violation = check_technician_capacity(reading)
    else:
        reading = config.workshop_reading(current, maximum)
        violation = check_capacity(reading)

    level = violation.level if violation else CapacityLevel.NORMAL
    usage = utilization(reading)

    click.echo(
        f"{usage.current}/{usage.max} jobs "
        f"({usage.utilization_percentage}%), "
        f"{usage.available_capacity} available: {level.value}"
    )

    if violation:
        colour = "red" if level == CapacityLevel.EXCEEDED else "yellow"
        click.echo(click.style(violation.message, fg=colour))

    if level == CapacityLevel.EXCEEDED:
        raise SystemExit(1)
