from __future__ import annotations

from github import UnknownObjectException

from reviewgate_core.models import ReviewTeam


def get_team(client, org: str, team_slug: str) -> ReviewTeam | None:
    """Return the team with its member logins, or None if the org has no such team."""
    try:
        team = client.get_organization(org).get_team_by_slug(team_slug)
    except UnknownObjectException:
        return None
    return ReviewTeam(slug=team_slug, members=[member.login for member in team.get_members()])
