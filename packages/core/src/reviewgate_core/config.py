import os
from pathlib import Path
from typing import Mapping, Optional

import yaml

DEFAULT_CONFIG: dict = {
    "org": None,
    "review_team_slug": None,
    "core_reviewers": "",  # comma-separated logins asked to review when approval is missing
    "additional_reviewers": "",  # comma-separated logins whose approval counts besides the team
    "check_name": "FrontendReviewStatus",
}

# Action input name → config key. The runner exposes each input as
# INPUT_<NAME upper-cased>, hyphens kept (e.g. INPUT_ACCESS-TOKEN).
ACTION_INPUTS = {
    "access-token": "access_token",
    "org": "org",
    "review-team-slug": "review_team_slug",
    "core-reviewers": "core_reviewers",
    "additional-reviewers": "additional_reviewers",
    "check-name": "check_name",
}

REQUIRED_KEYS = ("access_token", "org", "review_team_slug")


def get_input(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Read a GitHub Actions input the way the runner exposes it, stripped of whitespace.

    Workflow ``env:`` blocks can't always carry hyphenated names, so
    INPUT_ACCESS_TOKEN is accepted as a spelling of INPUT_ACCESS-TOKEN.
    """
    env = os.environ if environ is None else environ
    key = "INPUT_" + name.replace(" ", "_").upper()
    value = env.get(key) or env.get(key.replace("-", "_")) or ""
    return value.strip()


def load_config(
    config_path: Optional[str] = ".reviewgate.yml",
    cli_overrides: Optional[dict] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .reviewgate.yml in the current directory (skipped when config_path is None)
      3. GitHub Actions inputs (INPUT_* environment variables)
      4. CLI argument overrides
    """
    config = {**DEFAULT_CONFIG, "access_token": None}

    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                file_config = yaml.safe_load(f) or {}
            config.update(file_config)

    for input_name, key in ACTION_INPUTS.items():
        value = get_input(input_name, environ)
        if value:
            config[key] = value

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    return config


def missing_required(config: dict) -> list[str]:
    """Return the required keys that are unset or empty."""
    return [key for key in REQUIRED_KEYS if not config.get(key)]


def load_action_config(environ: Optional[Mapping[str, str]] = None) -> dict:
    """Configuration for a CI run: built-in defaults and Action inputs only.

    The checked-out tree belongs to the pushed commit, so its .reviewgate.yml
    is never read.
    """
    return load_config(config_path=None, environ=environ)
