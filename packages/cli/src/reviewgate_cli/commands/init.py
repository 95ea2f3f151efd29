"""init command — write .reviewgate.yml and the GitHub Actions workflow."""

from __future__ import annotations

import importlib.metadata
import re
import subprocess
from pathlib import Path

import click
import yaml
from rich.console import Console

console = Console()

_WORKFLOW_TEMPLATE = """\
name: Frontend Review

on:
  push:
  pull_request_review:
    types: [submitted]

jobs:
  {check_name}:
    runs-on: ubuntu-latest
    permissions:
      contents: read
      checks: write
      pull-requests: write

    steps:
      - uses: actions/checkout@v4

      - name: Set up Python
        uses: actions/setup-python@v5
        with:
          python-version: "3.12"

      - name: Install reviewgate
        run: pip install "reviewgate=={version}"

      - name: Enforce review policy
        env:
          INPUT_ACCESS_TOKEN: ${{{{ secrets.{token_secret} }}}}
          INPUT_ORG: {org}
          INPUT_REVIEW_TEAM_SLUG: {team}
          INPUT_CORE_REVIEWERS: {core_reviewers}
        run: reviewgate run
"""


@click.command("init")
@click.option("--repo", default=None, help="GitHub repository (owner/name). Auto-detected from git remote.")
def init_cmd(repo: str | None):
    """Set up reviewgate for a repository.

    Creates .reviewgate.yml with the review team settings and optionally
    generates a GitHub Actions workflow running on pushes and submitted reviews.
    """
    console.print("\n[bold cyan]reviewgate init[/bold cyan] — review policy setup\n")

    if repo is None:
        repo = _detect_repo_from_git()
        if repo:
            console.print(f"[dim]Detected repository: {repo}[/dim]")
        else:
            repo = click.prompt("GitHub repository (owner/name)")

    org = click.prompt("Organization owning the review team", default=repo.split("/", 1)[0])
    team = click.prompt("Review team slug", default="frontend")
    core_reviewers = click.prompt("Core reviewers to request (comma-separated logins)", default="", show_default=False)

    config: dict = {"org": org, "review_team_slug": team}
    if core_reviewers.strip():
        config["core_reviewers"] = core_reviewers.strip()

    _write_config(config)
    console.print("[green]Created .reviewgate.yml[/green]")

    setup_ci = click.confirm("\nGenerate .github/workflows/reviewgate.yml for GitHub Actions?", default=True)
    if setup_ci:
        token_secret = "REVIEWGATE_TOKEN"
        _write_workflow(org, team, config.get("core_reviewers", ""), token_secret)
        console.print("[green]Created .github/workflows/reviewgate.yml[/green]")
        console.print(
            f"\n[yellow]Remember to add [bold]{token_secret}[/bold] to your repository secrets. "
            "It needs read:org to list team members.[/yellow]"
        )

    console.print("\n[bold green]Setup complete![/bold green]")
    console.print(f"Check a commit with: [bold]reviewgate check --repo {repo} --sha <sha> --shadow[/bold]")


_GITHUB_REMOTE_RE = re.compile(r"github\.com[:/](?P<owner>[\w.-]+)/(?P<name>[\w.-]+?)(?:\.git)?/?$")


def parse_github_remote(url: str) -> str | None:
    """``owner/name`` for an https or ssh GitHub remote URL, else None."""
    match = _GITHUB_REMOTE_RE.search(url.strip())
    if not match:
        return None
    return f"{match['owner']}/{match['name']}"


def _detect_repo_from_git() -> str | None:
    try:
        result = subprocess.run(["git", "remote", "get-url", "origin"], capture_output=True, text=True, timeout=5)
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    return parse_github_remote(result.stdout)


def _write_config(config: dict) -> None:
    """Write or update .reviewgate.yml, preserving any existing keys."""
    path = Path(".reviewgate.yml")
    existing: dict = {}
    if path.exists():
        existing = yaml.safe_load(path.read_text()) or {}
    existing.update(config)
    path.write_text(yaml.dump(existing, default_flow_style=False, sort_keys=False))


def _get_version() -> str:
    try:
        return importlib.metadata.version("reviewgate")
    except importlib.metadata.PackageNotFoundError:
        return "0.1.0"


def _write_workflow(org: str, team: str, core_reviewers: str, token_secret: str) -> None:
    workflow_dir = Path(".github/workflows")
    workflow_dir.mkdir(parents=True, exist_ok=True)
    workflow_path = workflow_dir / "reviewgate.yml"
    workflow_path.write_text(
        _WORKFLOW_TEMPLATE.format(
            check_name="FrontendReviewStatus",
            version=_get_version(),
            token_secret=token_secret,
            org=org,
            team=team,
            core_reviewers=f'"{core_reviewers}"',
        )
    )
