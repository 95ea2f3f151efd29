"""check command — evaluate the review policy for a commit outside of CI."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from reviewgate_core.gh.pull_request import get_client, get_repo
from reviewgate_core.models import Action, PolicyDecision
from reviewgate_core.policy import evaluate_push

console = Console()

_ACTION_STYLE = {
    Action.NONE: "dim",
    Action.PASS: "green",
    Action.REQUEST_AND_FAIL: "red",
}


def _print_decision(decision: PolicyDecision) -> None:
    table = Table(title="Review policy", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    style = _ACTION_STYLE.get(decision.action, "white")
    table.add_row("Action", f"[{style}]{decision.action.value}[/{style}]")
    table.add_row("Pull request", f"#{decision.pull_number}" if decision.pull_number else "—")
    table.add_row("Requires review", "yes" if decision.requires_review else "no")
    table.add_row("innerHTML files", ", ".join(decision.inner_html_files) or "—")
    table.add_row("Approved", "yes" if decision.is_approved else "no")
    table.add_row("Reviewers", ", ".join(decision.requested_reviewers) or "—")
    table.add_row("Message", decision.message)
    console.print(table)


@click.command("check")
@click.option("--repo", required=True, help="GitHub repository in owner/name format.")
@click.option("--sha", required=True, help="Commit SHA to evaluate, as if it had just been pushed.")
@click.option("--org", default=None, help="Organization owning the review team. Overrides config file.")
@click.option("--team", "review_team_slug", default=None, help="Review team slug. Overrides config file.")
@click.option("--core-reviewers", default=None, help="Comma-separated logins to request reviews from.")
@click.option("--additional-reviewers", default=None, help="Comma-separated logins whose approval also counts.")
@click.option(
    "--shadow",
    "-s",
    is_flag=True,
    help="Dry-run mode: report the reviewers that would be requested without requesting them.",
)
@click.pass_context
def check_cmd(
    ctx,
    repo: str,
    sha: str,
    org: str | None,
    review_team_slug: str | None,
    core_reviewers: str | None,
    additional_reviewers: str | None,
    shadow: bool,
):
    """Evaluate the review policy for a pushed commit.

    Finds the open pull request containing SHA, checks whether its changes
    need the review team's approval and whether that approval exists.
    Exits with status 1 when approval is needed but missing.

    \b
    Required environment variables:
      GITHUB_TOKEN         GitHub personal access token (or use gh CLI)
    """
    from reviewgate_cli.auth import resolve_github_token
    from reviewgate_core.config import load_config

    config = load_config(ctx.obj["config_path"])
    overrides = {
        "org": org,
        "review_team_slug": review_team_slug,
        "core_reviewers": core_reviewers,
        "additional_reviewers": additional_reviewers,
    }
    config.update({k: v for k, v in overrides.items() if v is not None})

    token = resolve_github_token(config.get("access_token"))
    if not token:
        raise click.UsageError(
            "No GitHub token found. Set GITHUB_TOKEN or run `gh auth login` first.\n"
            "Create a token at https://github.com/settings/tokens"
        )
    if not config.get("org"):
        raise click.UsageError("No organization configured. Pass --org or set org in .reviewgate.yml.")
    if not config.get("review_team_slug"):
        raise click.UsageError("No review team configured. Pass --team or set review_team_slug in .reviewgate.yml.")

    client = get_client(token)
    this_repo = get_repo(repo, client=client)
    decision = evaluate_push(client, this_repo, sha, config, shadow=shadow)
    _print_decision(decision)

    if decision.failed:
        ctx.exit(1)
