"""Input utilities for CLI commands."""

import sys

import click


def read_lines_stdin() -> list[str]:
    """Read non-blank lines from stdin.

    Raises UsageError for interactive terminals.
    """
    if sys.stdin.isatty():
        raise click.UsageError("Expected input on stdin")

    return [line.strip() for line in sys.stdin if line.strip()]


def read_text_stdin() -> str:
    """Read all of stdin, dropping only the trailing newline.

    Raises UsageError for interactive terminals.
    """
    if sys.stdin.isatty():
        raise click.UsageError("Expected input on stdin")

    return sys.stdin.read().rstrip("\n")
