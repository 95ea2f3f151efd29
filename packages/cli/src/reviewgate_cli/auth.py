"""GitHub token lookup for ``reviewgate check``.

CI runs always get their token from the ``access-token`` input. A terminal
session falls back to, in order: the configured token, GITHUB_TOKEN, GH_TOKEN,
and the token of a logged-in GitHub CLI.
"""

from __future__ import annotations

import logging
import os
import subprocess

logger = logging.getLogger(__name__)

TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GH_TOKEN")


def _gh_cli_token() -> str | None:
    try:
        result = subprocess.run(["gh", "auth", "token"], capture_output=True, text=True, timeout=5)
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return None
    token = result.stdout.strip() if result.returncode == 0 else ""
    if token:
        logger.debug("Using the GitHub CLI session token.")
    return token or None


def resolve_github_token(configured: str | None = None) -> str | None:
    """First token found, or None; the caller turns None into a usage error."""
    if configured:
        return configured
    for name in TOKEN_ENV_VARS:
        if os.environ.get(name):
            return os.environ[name]
    return _gh_cli_token()
