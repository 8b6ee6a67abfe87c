"""Form CLI commands: validate a record from a YAML or JSON file."""

from pathlib import Path

import click
import yaml

from workshopguard.validation import FORM_VALIDATORS, validate_form


@click.group()
def forms():
    """Form validation commands."""
    pass


@forms.command("list")
def list_cmd():
    """List the forms that can be validated."""
    for name in sorted(FORM_VALIDATORS):
        click.echo(name)


@forms.command()
@click.argument("form", type=click.Choice(sorted(FORM_VALIDATORS)))
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(form: str, path: Path):
    """Validate the record in PATH against FORM."""
    try:
        record = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        click.echo(click.style(f"Error: cannot parse {path}: {e}", fg="red"), err=True)
        raise SystemExit(1)

    if record is None:
        record = {}
    if not isinstance(record, dict):
        click.echo(
            click.style(f"Error: {path} must contain a mapping of field values", fg="red"),
            err=True,
        )
        raise SystemExit(1)

    errors = validate_form(form, record)

    for error in errors:
        click.echo(click.style(f"{error.field}: {error.message}", fg="red"))

    if errors:
        click.echo(
            click.style(f"\n{len(errors)} violation(s) found", fg="red", bold=True)
        )
        raise SystemExit(1)

    click.echo(click.style(f"{form} record is valid.", fg="green", bold=True))
