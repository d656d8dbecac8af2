"""Main CLI entry point for smsuri."""

from __future__ import annotations

import json
import sys

import click

from .config import (
    DEFAULT_CONFIG,
    OUTPUT_FORMATS,
    get_config,
    get_output_format,
    set_config_value,
)
from .input import read_lines_stdin, read_text_stdin
from .logging import SmsUriError, configure_logging, get_logger
from .registry import SCHEMES, validate_uri
from .sms import sanitize_body
from .uri import parse_uri

logger = get_logger(__name__)


class ErrorHandlingGroup(click.Group):
    """Click group that handles SmsUriError with clean output."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except SmsUriError as e:
            logger.error(str(e))
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)


@click.group(cls=ErrorHandlingGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging to stderr")
@click.option(
    "--json-log",
    metavar="FILE",
    envvar="SMSURI_LOG",
    default="none",
    help='JSON log file path ("auto" for the default file, "-" for stdout, "none" to disable)',
)
def cli(verbose: bool, json_log: str):
    """smsuri: validate and normalize sms: URIs for sanitized rich text."""
    log_file = None if json_log == "none" else json_log
    configure_logging(verbose=verbose, json_log=log_file)


@cli.command()
@click.argument("uris", nargs=-1)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: output_format config setting)",
)
def normalize(uris: tuple[str, ...], output_format: str | None):
    """Validate and normalize URIs.

    URIs are taken from the arguments, or one per line from stdin when no
    arguments are given. Each result is printed on its own line.

    \b
    Example:
        smsuri normalize 'sms:%2B1%20555%201234?body=Hi'
        -> sms:+15551234?body=Hi
    """
    if not uris:
        uris = tuple(read_lines_stdin())
    if not uris:
        raise click.UsageError("No URIs given")
    as_json = (output_format or get_output_format()) == "json"

    for text in uris:
        uri = parse_uri(text)
        if not validate_uri(uri):
            raise SmsUriError(f"URI rejected: {text}")
        logger.info("Normalized URI", scheme=uri.scheme)
        if as_json:
            click.echo(json.dumps(uri.to_dict()))
        else:
            click.echo(uri.to_string())


@cli.command()
@click.argument("text", required=False)
def sanitize(text: str | None):
    """Sanitize an SMS message body.

    Reads the body from TEXT, or from stdin when TEXT is omitted.
    """
    if text is None:
        text = read_text_stdin()
    click.echo(sanitize_body(text))


@cli.command()
def schemes():
    """List registered URI schemes and their capability flags."""
    click.echo(json.dumps([s.capabilities() for s in SCHEMES.values()], indent=2))


@cli.group()
def config():
    """Show or change configuration."""


@config.command("show")
def config_show():
    """Print the configuration with defaults applied."""
    click.echo(json.dumps(get_config(), indent=2))


@config.command("set")
@click.argument("key", type=click.Choice(sorted(DEFAULT_CONFIG)))
@click.argument("value")
def config_set(key: str, value: str):
    """Set a configuration value.

    \b
    allowed_schemes takes a comma-separated list, e.g. "sms".
    output_format takes "uri" or "json".
    """
    parsed: str | list[str] = value
    if key == "allowed_schemes":
        parsed = [s.strip().lower() for s in value.split(",") if s.strip()]
    elif key == "output_format" and value not in OUTPUT_FORMATS:
        raise SmsUriError(
            f"Invalid output_format: {value} (expected one of: {', '.join(OUTPUT_FORMATS)})"
        )
    set_config_value(key, parsed)
    click.echo(f"Set {key} = {json.dumps(parsed)}")
