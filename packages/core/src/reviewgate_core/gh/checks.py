from __future__ import annotations

from reviewgate_core.models import CheckRunRef


def get_check_runs(repo, ref: str) -> list[CheckRunRef]:
    runs = repo.get_commit(ref).get_check_runs()
    return [CheckRunRef(name=run.name, check_suite_id=run.check_suite_id) for run in runs]


def rerequest_check_suite(repo, check_suite_id: int) -> bool:
    return repo.get_check_suite(check_suite_id).rerequest()
