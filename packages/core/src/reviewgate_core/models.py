"""Entities the policy engine works with.

PyGithub objects are mapped into these shapes inside ``reviewgate_core.gh``
so the decision logic never depends on the REST API's response layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

APPROVED = "APPROVED"


class Action(str, Enum):
    NONE = "NONE"
    REQUEST_AND_FAIL = "REQUEST_AND_FAIL"
    PASS = "PASS"


@dataclass(frozen=True)
class ChangedFile:
    path: str
    patch: str | None = None


@dataclass
class ReviewTeam:
    slug: str
    members: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Approval:
    """A single review entry on a pull request.

    Only entries with ``state == "APPROVED"`` count, and only for the commit
    they were submitted against.
    """

    reviewer_login: str
    commit_id: str
    state: str

    @property
    def is_approval(self) -> bool:
        return self.state == APPROVED


@dataclass(frozen=True)
class PullRequestRef:
    number: int
    state: str
    author_login: str
    head_sha: str


@dataclass(frozen=True)
class CheckRunRef:
    name: str
    check_suite_id: int


@dataclass
class PolicyDecision:
    """Outcome of one push-event evaluation."""

    action: Action
    requires_review: bool = False
    inner_html_files: list[str] = field(default_factory=list)
    is_approved: bool = False
    pull_number: int | None = None
    requested_reviewers: list[str] = field(default_factory=list)
    message: str = ""

    @property
    def failed(self) -> bool:
        return self.action is Action.REQUEST_AND_FAIL
