"""Flask CLI commands for checking registration payloads offline."""

from __future__ import annotations

import json
import logging

import click
from flask import current_app
from flask.cli import with_appcontext

from signup.core.errors import ValidationFailed
from signup.schemas import RegisteredUserSchema
from signup.services.registration.dto import RegistrationIn
from signup.services.registration.rules import RULEBOOK
from signup.services.registration.validator import validate

LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Raise logging verbosity for the registration modules when requested."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger("signup.services.registration").setLevel(level)
    LOGGER.setLevel(level)


def _read_payload(raw: str) -> dict:
    """Parse ``raw`` (or stdin when ``"-"``) as a JSON object."""
    text = click.get_text_stream("stdin").read() if raw == "-" else raw
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise click.UsageError(f"PAYLOAD is not valid JSON: {exc.msg}") from exc
    if not isinstance(payload, dict):
        raise click.UsageError("PAYLOAD must be a JSON object.")
    return payload


@click.group("registration")
@click.option("--verbose", is_flag=True, help="Enable verbose logging.")
@click.pass_context
def registration_cli(ctx: click.Context, verbose: bool) -> None:
    """Inspect and exercise the signup field rules."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


@registration_cli.command("check")
@click.argument("payload")
@with_appcontext
def check_command(payload: str) -> None:
    """Validate PAYLOAD (a JSON object, or '-' for stdin) like POST /users."""
    result = validate(
        RegistrationIn.from_mapping(_read_payload(payload)),
        id_provider=current_app.extensions.get("id_provider"),
        clock=current_app.extensions.get("clock"),
    )
    if result.user is None:
        LOGGER.debug("check.rejected", extra={"errors": list(result.errors)})
        body = {"error": ValidationFailed.TITLE, "message": ", ".join(result.errors)}
        click.echo(current_app.json.dumps(body))
        raise click.exceptions.Exit(1)
    click.echo(current_app.json.dumps(RegisteredUserSchema().dump(result.user)))


@registration_cli.command("rules")
def rules_command() -> None:
    """Print the ordered rule table."""
    click.echo("Registration rules:")
    width = max(len(field_rules.field) for field_rules in RULEBOOK)
    for field_rules in RULEBOOK:
        click.echo(f"  {field_rules.field.ljust(width)}  required  {field_rules.required_message}")
        for rule in field_rules.rules:
            click.echo(f"  {field_rules.field.ljust(width)}  {rule.key:<8}  {rule.message}")
