from __future__ import annotations

import logging

from github import Github

from reviewgate_core.models import Approval, ChangedFile, PullRequestRef

logger = logging.getLogger(__name__)


def get_client(token: str) -> Github:
    return Github(token)


def get_repo(repo_name: str, token: str | None = None, client: Github | None = None):
    gh = client if client is not None else Github(token)
    return gh.get_repo(repo_name)


def get_pull(repo, pr_number: int):
    return repo.get_pull(pr_number)


def to_pull_request_ref(pr) -> PullRequestRef:
    return PullRequestRef(
        number=pr.number,
        state=pr.state,
        author_login=pr.user.login if pr.user is not None else "",
        head_sha=pr.head.sha,
    )


def get_pulls_for_commit(repo, sha: str) -> list[PullRequestRef]:
    """Return the pull requests GitHub associates with a commit, in API order."""
    return [to_pull_request_ref(pr) for pr in repo.get_commit(sha).get_pulls()]


def get_open_pulls_for_commit(repo, sha: str) -> list[PullRequestRef]:
    return [pr for pr in get_pulls_for_commit(repo, sha) if pr.state == "open"]


def get_changed_files(repo, pr_number: int) -> list[ChangedFile]:
    return [ChangedFile(path=f.filename, patch=f.patch) for f in get_pull(repo, pr_number).get_files()]


def get_reviews(repo, pr_number: int) -> list[Approval]:
    reviews = []
    for review in get_pull(repo, pr_number).get_reviews():
        # Reviews from deleted accounts come back without a user.
        login = review.user.login if review.user is not None else ""
        reviews.append(Approval(reviewer_login=login, commit_id=review.commit_id, state=review.state))
    return reviews


def request_reviewers(repo, pr_number: int, reviewers: list[str]) -> None:
    logger.debug("Creating review request on #%d for %s", pr_number, reviewers)
    get_pull(repo, pr_number).create_review_request(reviewers=reviewers)
