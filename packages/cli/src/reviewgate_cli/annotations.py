"""GitHub Actions workflow commands.

The runner parses ``::<command>::<message>`` lines on stdout into log
annotations. Failing a step is an error annotation plus a non-zero exit code.
"""

from __future__ import annotations

import click


def _escape(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def debug(message: str) -> None:
    click.echo(f"::debug::{_escape(message)}")


def warning(message: str) -> None:
    click.echo(f"::warning::{_escape(message)}")


def error(message: str) -> None:
    click.echo(f"::error::{_escape(message)}")


def set_failed(message: str) -> None:
    """Annotate ``message`` as an error and exit with status 1."""
    error(message)
    raise click.exceptions.Exit(1)
