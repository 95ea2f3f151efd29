from __future__ import annotations

import logging
from typing import Iterable

from reviewgate_core.gh.pull_request import get_reviews
from reviewgate_core.models import Approval
from reviewgate_core.reviewers import parse_login_list, resolve_team_members

logger = logging.getLogger(__name__)


def approved_logins_for_commit(reviews: Iterable[Approval], commit_id: str) -> set[str]:
    """Logins that approved exactly ``commit_id``; approvals of earlier pushes are ignored."""
    return {r.reviewer_login for r in reviews if r.is_approval and r.commit_id == commit_id}


def authorized_logins(team_members: Iterable[str], additional_reviewers: str | None) -> set[str]:
    return set(team_members) | set(parse_login_list(additional_reviewers))


def is_approved(
    reviews: Iterable[Approval],
    commit_id: str,
    team_members: Iterable[str],
    additional_reviewers: str | None = None,
) -> bool:
    """True if at least one authorized login approved ``commit_id``."""
    approved = approved_logins_for_commit(reviews, commit_id)
    return bool(approved & authorized_logins(team_members, additional_reviewers))


def check_approval_for_commit(
    client,
    repo,
    org: str,
    pr_number: int,
    commit_id: str,
    additional_reviewers: str | None,
    team_slug: str,
) -> bool:
    """Fetch the PR's reviews and the team roster, then apply :func:`is_approved`."""
    reviews = get_reviews(repo, pr_number)
    team_members = resolve_team_members(client, org, team_slug)
    approved = is_approved(reviews, commit_id, team_members, additional_reviewers)
    logger.debug("Approval for %s on #%d: %s", commit_id[:7], pr_number, approved)
    return approved
