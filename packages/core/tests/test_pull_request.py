"""Tests for the pull request adapters over PyGithub."""

import types
from unittest.mock import MagicMock

from reviewgate_core.gh.pull_request import (
    get_changed_files,
    get_open_pulls_for_commit,
    get_pulls_for_commit,
    get_reviews,
    request_reviewers,
    to_pull_request_ref,
)
from reviewgate_core.models import Approval, ChangedFile, PullRequestRef

SHA = "a" * 40
SHA2 = "b" * 40


def _pr(number, state="open", login="author", head_sha=SHA):
    pr = MagicMock()
    pr.number = number
    pr.state = state
    pr.user.login = login
    pr.head.sha = head_sha
    return pr


def _review(login, commit_id, state):
    r = MagicMock()
    r.user.login = login
    r.commit_id = commit_id
    r.state = state
    return r


class TestToPullRequestRef:
    def test_maps_fields(self):
        assert to_pull_request_ref(_pr(3, login="dev", head_sha=SHA2)) == PullRequestRef(
            number=3, state="open", author_login="dev", head_sha=SHA2
        )

    def test_missing_user(self):
        pr = _pr(3)
        pr.user = None
        assert to_pull_request_ref(pr).author_login == ""


class TestPullsForCommit:
    def test_lists_associated_pulls_in_api_order(self):
        repo = MagicMock()
        repo.get_commit.return_value.get_pulls.return_value = [_pr(2), _pr(1, state="closed")]

        result = get_pulls_for_commit(repo, SHA)

        repo.get_commit.assert_called_once_with(SHA)
        assert [p.number for p in result] == [2, 1]

    def test_open_filter_drops_closed(self):
        repo = MagicMock()
        repo.get_commit.return_value.get_pulls.return_value = [_pr(5, state="closed"), _pr(6), _pr(4)]

        assert [p.number for p in get_open_pulls_for_commit(repo, SHA)] == [6, 4]


class TestGetChangedFiles:
    def test_maps_filename_and_patch(self):
        repo = MagicMock()
        repo.get_pull.return_value.get_files.return_value = [
            types.SimpleNamespace(filename="src/a.ts", patch="+x"),
            types.SimpleNamespace(filename="logo.png", patch=None),
        ]

        result = get_changed_files(repo, 9)

        repo.get_pull.assert_called_once_with(9)
        assert result == [ChangedFile("src/a.ts", "+x"), ChangedFile("logo.png", None)]


class TestGetReviews:
    def test_maps_reviews(self):
        repo = MagicMock()
        repo.get_pull.return_value.get_reviews.return_value = [_review("alice", SHA, "APPROVED")]

        assert get_reviews(repo, 1) == [Approval(reviewer_login="alice", commit_id=SHA, state="APPROVED")]

    def test_review_without_user(self):
        review = _review("x", SHA, "APPROVED")
        review.user = None
        repo = MagicMock()
        repo.get_pull.return_value.get_reviews.return_value = [review]

        assert get_reviews(repo, 1)[0].reviewer_login == ""


class TestRequestReviewers:
    def test_creates_review_request(self):
        repo = MagicMock()
        request_reviewers(repo, 4, ["alice", "bob"])
        repo.get_pull.return_value.create_review_request.assert_called_once_with(reviewers=["alice", "bob"])
