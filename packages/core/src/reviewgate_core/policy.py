"""Push-event review policy.

A push is evaluated against the open pull request it belongs to. When the
PR's diff touches protected paths or adds innerHTML, an approval of the
pushed commit by the review team (or an additional reviewer) is required;
without one, core reviewers are asked to review and the run fails.
"""

from __future__ import annotations

import logging

from rich.console import Console

from reviewgate_core.approvals import check_approval_for_commit
from reviewgate_core.gh.pull_request import get_changed_files, get_open_pulls_for_commit, request_reviewers
from reviewgate_core.models import Action, PolicyDecision, PullRequestRef
from reviewgate_core.predicates import detect_banned_pattern_files, requires_reviewable_change
from reviewgate_core.reviewers import reviewers_to_request, team_display_name

console = Console()
logger = logging.getLogger(__name__)


def find_pull_request_for_commit(repo, sha: str) -> PullRequestRef | None:
    """Return the first open PR associated with ``sha``, or None.

    A commit can belong to several open PRs (e.g. stacked branches); the
    first one in GitHub's order is used.
    """
    open_pulls = get_open_pulls_for_commit(repo, sha)
    if len(open_pulls) > 1:
        logger.warning("Multiple pull requests found for SHA: %s.", sha)
        console.print(f"[yellow]WARNING: Multiple pull requests found for SHA: {sha}.[/yellow]")
    return open_pulls[0] if open_pulls else None


def failure_message(team_name: str, inner_html_files: list[str]) -> str:
    if inner_html_files:
        return f"innerHTML is added/updated in {', '.join(inner_html_files)}, {team_name} approval needed"
    return f"{team_name} approval needed"


def evaluate_push(client, repo, sha: str, config: dict, shadow: bool = False) -> PolicyDecision:
    """Run the review policy for a pushed commit and return the decision.

    Reviewer requests are made here, before the caller signals the failure.
    With ``shadow=True`` the request is only reported.
    """
    team_slug = config["review_team_slug"]
    team_name = team_display_name(team_slug)

    pull = find_pull_request_for_commit(repo, sha)
    if pull is None:
        console.print("Pull request not found.")
        return PolicyDecision(action=Action.NONE, message="Pull request not found.")

    console.print(f"PROCESSING: Fetching changed files for PR:#{pull.number}")
    changed_files = get_changed_files(repo, pull.number)
    inner_html_files = detect_banned_pattern_files(changed_files)
    requires_review = requires_reviewable_change(changed_files) or bool(inner_html_files)

    if not requires_review:
        message = f"No approval needed from {team_name}."
        console.print(f"[green]SUCCESS: {message}[/green]")
        return PolicyDecision(action=Action.PASS, pull_number=pull.number, message=message)

    console.print("STATUS: Checking approval status")
    approved = check_approval_for_commit(
        client,
        repo,
        config["org"],
        pull.number,
        sha,
        config.get("additional_reviewers"),
        team_slug,
    )
    if approved:
        message = f"{team_name} approved changes."
        console.print(f"[green]SUCCESS: {message}[/green]")
        return PolicyDecision(
            action=Action.PASS,
            requires_review=requires_review,
            inner_html_files=inner_html_files,
            is_approved=True,
            pull_number=pull.number,
            message=message,
        )

    console.print(f"PR author: {pull.author_login}")
    reviewers = reviewers_to_request(config.get("core_reviewers"), pull.author_login)
    if not reviewers:
        console.print("[yellow]No core reviewers to request.[/yellow]")
    elif shadow:
        console.print(f"[dim]Shadow mode: would request review from: {', '.join(reviewers)}[/dim]")
    else:
        console.print(f"Requesting review from: {', '.join(reviewers)}")
        request_reviewers(repo, pull.number, reviewers)

    return PolicyDecision(
        action=Action.REQUEST_AND_FAIL,
        requires_review=requires_review,
        inner_html_files=inner_html_files,
        is_approved=False,
        pull_number=pull.number,
        requested_reviewers=reviewers,
        message=failure_message(team_name, inner_html_files),
    )
