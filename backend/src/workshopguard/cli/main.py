"""workshopguard CLI entry point."""

import click


@click.group()
def cli():
    """workshopguard: field-service validation and workflow guards."""
    pass


# Register subcommand groups
from workshopguard.cli.capacity_cmd import capacity  # noqa: E402
from workshopguard.cli.forms_cmd import forms  # noqa: E402
from workshopguard.cli.transitions_cmd import transitions  # noqa: E402

cli.add_command(forms)
cli.add_command(transitions)
cli.add_command(capacity)
