"""Tests for re-running the review status check after a review."""

import types
from unittest.mock import MagicMock

import pytest
from github import GithubException

from reviewgate_core.context import ActionContext
from reviewgate_core.errors import ReviewGateError
from reviewgate_core.retrigger import get_pull_request_head_sha, retrigger_review_check

HEAD_SHA = "d" * 40


def _context(payload=None):
    return ActionContext(
        event_name="pull_request_review",
        sha="e" * 40,
        repository="acme/web",
        payload={"pull_request": {"number": 5}} if payload is None else payload,
    )


def _repo(check_runs):
    repo = MagicMock()
    repo.get_pull.return_value.head.sha = HEAD_SHA
    repo.get_commit.return_value.get_check_runs.return_value = [
        types.SimpleNamespace(name=name, check_suite_id=suite_id) for name, suite_id in check_runs
    ]
    repo.get_check_suite.return_value.rerequest.return_value = True
    return repo


def test_head_sha_from_pull():
    repo = _repo([])
    assert get_pull_request_head_sha(repo, 5) == HEAD_SHA
    repo.get_pull.assert_called_once_with(5)


def test_rerequests_matching_check_suite():
    repo = _repo([("lint", 10), ("FrontendReviewStatus", 77)])

    assert retrigger_review_check(repo, _context()) is True

    repo.get_commit.assert_called_once_with(HEAD_SHA)
    repo.get_check_suite.assert_called_once_with(77)
    repo.get_check_suite.return_value.rerequest.assert_called_once()


def test_custom_check_name():
    repo = _repo([("ReviewGate", 3)])
    retrigger_review_check(repo, _context(), check_name="ReviewGate")
    repo.get_check_suite.assert_called_once_with(3)


def test_missing_pull_request_is_fatal():
    repo = _repo([])
    with pytest.raises(ReviewGateError, match="Pull request not found"):
        retrigger_review_check(repo, _context(payload={}))
    repo.get_pull.assert_not_called()


def test_missing_check_run_is_fatal():
    repo = _repo([("lint", 10), ("build", 11)])
    with pytest.raises(ReviewGateError, match="No matching check found"):
        retrigger_review_check(repo, _context())
    repo.get_check_suite.assert_not_called()


def test_rerequest_failure_is_swallowed(caplog):
    repo = _repo([("FrontendReviewStatus", 77)])
    repo.get_check_suite.return_value.rerequest.side_effect = GithubException(
        403, {"message": "Resource not accessible by integration"}, {}
    )

    assert retrigger_review_check(repo, _context()) is False
    assert "77" in caplog.text
