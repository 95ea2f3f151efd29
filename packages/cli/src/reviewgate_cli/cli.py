"""CLI entry point for reviewgate.

Commands:
  run    — GitHub Actions entry point; dispatches push and review events
  check  — evaluate the review policy for a commit from a terminal
  init   — write .reviewgate.yml and a GitHub Actions workflow
"""

from __future__ import annotations

import importlib.metadata
import logging

import click

from reviewgate_cli.commands.check import check_cmd
from reviewgate_cli.commands.init import init_cmd
from reviewgate_cli.commands.run import run_cmd


@click.group()
@click.version_option(
    version=importlib.metadata.version("reviewgate"),
    prog_name="reviewgate",
)
@click.option(
    "--config",
    "config_path",
    default=".reviewgate.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="REVIEWGATE_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Require review-team approval for sensitive frontend changes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    ctx.ensure_object(dict)
    # Read by local commands only; `run` takes its settings from Action inputs.
    ctx.obj["config_path"] = config_path


main.add_command(run_cmd)
main.add_command(check_cmd)
main.add_command(init_cmd)
