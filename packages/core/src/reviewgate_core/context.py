"""The GitHub Actions run context, read once and passed around explicitly.

The Actions runner describes the triggering event through environment
variables (``GITHUB_EVENT_NAME``, ``GITHUB_SHA``, ``GITHUB_REPOSITORY``) and a
JSON payload file at ``GITHUB_EVENT_PATH``. Collecting them into one value
keeps the workflows free of global environment reads and lets tests build a
context by hand.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

PUSH_EVENT = "push"
REVIEW_EVENT = "pull_request_review"


@dataclass
class ActionContext:
    event_name: str
    sha: str
    repository: str  # owner/name
    payload: dict = field(default_factory=dict)

    @property
    def owner(self) -> str:
        return self.repository.split("/", 1)[0]

    @property
    def repo(self) -> str:
        return self.repository.split("/", 1)[-1]

    @property
    def pull_request(self) -> Optional[dict]:
        """The ``pull_request`` object of the event payload, if the event carries one."""
        return self.payload.get("pull_request") or None


def load_event_payload(event_path: str | None) -> dict:
    if not event_path:
        return {}
    path = Path(event_path)
    if not path.exists():
        logger.debug("Event payload %s does not exist.", event_path)
        return {}
    with open(path, encoding="utf-8") as f:
        return json.load(f) or {}


def load_context(environ: Mapping[str, str] | None = None) -> ActionContext:
    env = os.environ if environ is None else environ
    return ActionContext(
        event_name=env.get("GITHUB_EVENT_NAME", ""),
        sha=env.get("GITHUB_SHA", ""),
        repository=env.get("GITHUB_REPOSITORY", ""),
        payload=load_event_payload(env.get("GITHUB_EVENT_PATH")),
    )
