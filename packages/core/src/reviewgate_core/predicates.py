"""Classifiers over a pull request's changed files.

Both checks are plain path and text matching. The banned-pattern scan is a
regex heuristic, not a parser: it flags the identifiers inside comments or
strings too, and misses them when aliased.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from reviewgate_core.models import ChangedFile

logger = logging.getLogger(__name__)

# Root-level dependency manifests; compared against the full path.
MANIFEST_FILES = ("package.json", "package-lock.json")
STYLE_EXTENSIONS = (".css", ".scss")
PROTECTED_DIR_MARKER = "app/modules/Common"

SCRIPT_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")
INNER_HTML_RE = re.compile(r"^\+.*(dangerouslySetInnerHTML|innerHTML).*$", re.MULTILINE)


def is_protected_path(path: str) -> bool:
    return path in MANIFEST_FILES or path.endswith(STYLE_EXTENSIONS) or PROTECTED_DIR_MARKER in path


def is_script_file(path: str) -> bool:
    return path.endswith(SCRIPT_EXTENSIONS)


def adds_inner_html(patch: str | None) -> bool:
    """Return True if any added line in the patch references innerHTML."""
    if not patch:
        return False
    return INNER_HTML_RE.search(patch) is not None


def requires_reviewable_change(files: Iterable[ChangedFile]) -> bool:
    return any(is_protected_path(f.path) for f in files)


def detect_banned_pattern_files(files: Iterable[ChangedFile]) -> list[str]:
    """Return paths of script files whose patch adds an innerHTML assignment, in input order."""
    flagged = [f.path for f in files if is_script_file(f.path) and adds_inner_html(f.patch)]
    if flagged:
        logger.warning("innerHTML updated in following files %s.", ", ".join(flagged))
    return flagged
