"""Re-run the review status check after a review is submitted.

A review does not trigger a push, so the check that enforces the policy
would keep its stale result. Re-requesting its check suite makes the push
workflow evaluate the head commit again with the new review in place.
"""

from __future__ import annotations

import logging

from github import GithubException
from rich.console import Console

from reviewgate_core.context import ActionContext
from reviewgate_core.errors import ReviewGateError
from reviewgate_core.gh.checks import get_check_runs, rerequest_check_suite
from reviewgate_core.gh.pull_request import get_pull

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_CHECK_NAME = "FrontendReviewStatus"


def get_pull_request_head_sha(repo, pr_number: int) -> str:
    return get_pull(repo, pr_number).head.sha


def retrigger_review_check(repo, context: ActionContext, check_name: str = DEFAULT_CHECK_NAME) -> bool:
    """Re-request the check suite of ``check_name`` on the reviewed PR's head commit.

    Returns whether GitHub accepted the re-request. Raises ReviewGateError when
    the event has no pull request or the head commit has no such check run.
    """
    console.print("LOG: Finding Frontend Review Check")
    pull_request = context.pull_request
    if not pull_request:
        raise ReviewGateError("Pull request not found.")

    head_sha = get_pull_request_head_sha(repo, pull_request["number"])
    console.print(f"LOG: Finding checks for PR: {head_sha}")
    check_runs = get_check_runs(repo, head_sha)
    console.print(f"LOG: Found {len(check_runs)} check runs.")

    review_check = next((run for run in check_runs if run.name == check_name), None)
    if review_check is None:
        console.print(f"Check runs: {', '.join(run.name for run in check_runs) or '(none)'}")
        raise ReviewGateError("No matching check found.")

    console.print(f"LOG: Re-triggering Review Check {review_check.name}")
    try:
        return rerequest_check_suite(repo, review_check.check_suite_id)
    except GithubException as e:
        # Best effort: a failed re-run must not fail the review event.
        logger.warning("Could not re-request check suite %d: %s", review_check.check_suite_id, e)
        console.print(f"[yellow]{e}[/yellow]")
        return False
