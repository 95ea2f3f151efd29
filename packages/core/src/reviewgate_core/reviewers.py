"""Who may approve, and who gets asked to review."""

from __future__ import annotations

import logging

from reviewgate_core.gh.teams import get_team

logger = logging.getLogger(__name__)


def parse_login_list(csv: str | None) -> list[str]:
    """Split a comma-separated login list, trimming entries and dropping empty ones."""
    if not csv:
        return []
    return [login.strip() for login in csv.split(",") if login.strip()]


def team_display_name(team_slug: str) -> str:
    """``frontend`` → ``Frontend-Team``."""
    return f"{team_slug.capitalize()}-Team"


def resolve_team_members(client, org: str, team_slug: str) -> list[str]:
    """Return the member logins of ``org/team_slug``.

    A team that cannot be found resolves to no members, so nobody qualifies
    through team membership and only explicit additional reviewers count.
    """
    team = get_team(client, org, team_slug)
    if team is None:
        logger.warning("Team %r not found in %s; treating it as having no members.", team_slug, org)
        return []
    logger.debug("Team %s members: %s", team_slug, ", ".join(team.members))
    return team.members


def reviewers_to_request(core_reviewers: str | None, author_login: str) -> list[str]:
    return [login for login in parse_login_list(core_reviewers) if login != author_login]
