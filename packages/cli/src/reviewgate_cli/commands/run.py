"""run command — the GitHub Actions entry point.

Reads the run context and Action inputs from the environment and routes the
triggering event:

  push                 → evaluate the review policy for the pushed commit
  pull_request_review  → re-run the review status check on the PR head
"""

from __future__ import annotations

import logging

import click
from rich.console import Console

from reviewgate_cli import annotations
from reviewgate_core.context import PUSH_EVENT, REVIEW_EVENT, ActionContext, load_context
from reviewgate_core.errors import ReviewGateError
from reviewgate_core.gh.pull_request import get_client, get_repo
from reviewgate_core.policy import evaluate_push
from reviewgate_core.retrigger import retrigger_review_check

console = Console()
logger = logging.getLogger(__name__)


def dispatch(context: ActionContext, config: dict) -> None:
    """Route one event to its workflow. Failures are signalled through annotations."""
    client = get_client(config["access_token"])
    console.print(f"EVENT: {context.event_name}")

    if context.event_name == PUSH_EVENT:
        repo = get_repo(context.repository, client=client)
        decision = evaluate_push(client, repo, context.sha, config)
        if decision.failed:
            annotations.set_failed(f"ERROR: {decision.message}")
        return

    if context.event_name == REVIEW_EVENT:
        repo = get_repo(context.repository, client=client)
        retrigger_review_check(repo, context, check_name=config["check_name"])
        return

    console.print("ERROR: Event not handled")


@click.command("run")
def run_cmd():
    """Evaluate the current GitHub Actions event.

    \b
    Action inputs (INPUT_* environment variables):
      access-token          token used for API calls (required)
      org                   organization that owns the review team (required)
      review-team-slug      slug of the review team (required)
      core-reviewers        comma-separated logins to request reviews from
      additional-reviewers  comma-separated logins whose approval also counts
    """
    from reviewgate_core.config import load_action_config, missing_required

    try:
        config = load_action_config()
        missing = missing_required(config)
        if missing:
            annotations.debug("Please provide access-token, org and review-team-slug")
            logger.debug("Missing required inputs: %s", ", ".join(missing))
            return

        context = load_context()
        dispatch(context, config)
    except click.exceptions.Exit:
        raise
    except ReviewGateError as e:
        annotations.set_failed(f"ERROR: {e}")
    except Exception as e:
        logger.debug("Unhandled error in run", exc_info=True)
        annotations.set_failed(str(e))
