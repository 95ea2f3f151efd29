"""Tests for configuration loading."""

from reviewgate_core.config import get_input, load_action_config, load_config, missing_required


def test_defaults_applied_when_no_config_file(tmp_path):
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"), environ={})
    assert config["check_name"] == "FrontendReviewStatus"
    assert config["core_reviewers"] == ""
    assert config["additional_reviewers"] == ""
    assert config["org"] is None
    assert config["access_token"] is None


def test_config_file_overrides_defaults(tmp_path):
    cfg = tmp_path / ".gate.yml"
    cfg.write_text("org: acme\nreview_team_slug: frontend\ncore_reviewers: alice,bob\n")
    config = load_config(config_path=str(cfg), environ={})
    assert config["org"] == "acme"
    assert config["review_team_slug"] == "frontend"
    assert config["core_reviewers"] == "alice,bob"


def test_action_inputs_override_config_file(tmp_path):
    cfg = tmp_path / ".gate.yml"
    cfg.write_text("org: acme\n")
    env = {
        "INPUT_ACCESS-TOKEN": "tok",
        "INPUT_ORG": "other-org",
        "INPUT_REVIEW-TEAM-SLUG": "frontend",
        "INPUT_ADDITIONAL-REVIEWERS": "dave",
    }
    config = load_config(config_path=str(cfg), environ=env)
    assert config["access_token"] == "tok"
    assert config["org"] == "other-org"
    assert config["review_team_slug"] == "frontend"
    assert config["additional_reviewers"] == "dave"


def test_empty_action_inputs_ignored(tmp_path):
    cfg = tmp_path / ".gate.yml"
    cfg.write_text("org: acme\n")
    config = load_config(config_path=str(cfg), environ={"INPUT_ORG": "  "})
    assert config["org"] == "acme"


def test_cli_overrides_win(tmp_path):
    config = load_config(
        config_path=str(tmp_path / "nonexistent.yml"),
        cli_overrides={"org": "cli-org", "check_name": None},
        environ={"INPUT_ORG": "input-org"},
    )
    assert config["org"] == "cli-org"
    assert config["check_name"] == "FrontendReviewStatus"


def test_get_input_hyphenated_name():
    assert get_input("review-team-slug", {"INPUT_REVIEW-TEAM-SLUG": " frontend "}) == "frontend"


def test_get_input_underscore_spelling():
    assert get_input("access-token", {"INPUT_ACCESS_TOKEN": "tok"}) == "tok"


def test_get_input_missing():
    assert get_input("org", {}) == ""


def test_get_input_reads_os_environ(monkeypatch):
    monkeypatch.setenv("INPUT_ORG", "acme")
    assert get_input("org") == "acme"


def test_missing_required_lists_unset_keys():
    assert missing_required({"access_token": "tok", "org": "", "review_team_slug": None}) == [
        "org",
        "review_team_slug",
    ]


def test_missing_required_empty_when_complete():
    assert missing_required({"access_token": "tok", "org": "acme", "review_team_slug": "frontend"}) == []


def test_action_config_ignores_checked_out_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".reviewgate.yml").write_text("org: evil\nadditional_reviewers: accomplice\n")
    config = load_action_config(environ={"INPUT_ORG": "acme", "INPUT_REVIEW-TEAM-SLUG": "frontend"})
    assert config["org"] == "acme"
    assert config["review_team_slug"] == "frontend"
    assert config["additional_reviewers"] == ""
