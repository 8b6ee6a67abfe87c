"""Repair workflow CLI commands: show the table and check a transition."""

import click

from workshopguard.workflow import (
    INITIAL_STATUS,
    TRANSITION_TABLE,
    check_transition,
    job_status_for,
)


@click.group()
def transitions():
    """Equipment repair workflow commands."""
    pass


@transitions.command()
def show():
    """Print the status transition table."""
    for status, allowed in TRANSITION_TABLE.items():
        marker = " (initial)" if status == INITIAL_STATUS else ""
        targets = ", ".join(s.value for s in allowed) or "(terminal)"
        click.echo(f"{status.value}{marker} -> {targets}")


@transitions.command()
@click.argument("current")
@click.argument("proposed")
def check(current: str, proposed: str):
    """Check whether CURRENT may move directly to PROPOSED."""
    violation = check_transition(current, proposed)
    if violation:
        click.echo(click.style(violation.message, fg="red"))
        raise SystemExit(1)

    job_status = job_status_for(proposed)
    click.echo(
        click.style(f"{current} -> {proposed} is allowed.", fg="green")
        + f" Job status becomes {job_status.value}."
    )
