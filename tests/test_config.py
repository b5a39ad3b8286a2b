"""Tests for configuration loading (YAML, env substitution, secrets)."""

from pathlib import Path
from unittest.mock import patch

import pytest

from changeset_bot.config import AppConfig, GitHubConfig, load_config
from changeset_bot.services.reconciler import DEFAULT_BOT_LOGINS


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "absent.yaml")

    assert isinstance(config, AppConfig)
    assert config.bot.known_logins_set == DEFAULT_BOT_LOGINS
    assert config.bot.release_branch_prefix == "release"
    assert config.github.webhook_path == "/webhook/github"
    assert config.webhook.port == 8000


def test_yaml_values_loaded(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "bot:\n"
        "  known_logins: ['acme-bot[bot]']\n"
        "  release_branch_prefix: 'ship/'\n"
        "github:\n"
        "  api_url: 'https://ghe.example.com/api/v3'\n"
        "webhook:\n"
        "  port: 9001\n"
        "logging:\n"
        "  level: DEBUG\n"
    )

    config = load_config(path)

    assert config.bot.known_logins_set == frozenset({"acme-bot[bot]"})
    assert config.bot.release_branch_prefix == "ship/"
    assert config.github.api_url == "https://ghe.example.com/api/v3"
    assert config.webhook.port == 9001
    assert config.logging.level == "DEBUG"


def test_env_placeholder_substituted(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MY_TOKEN", "tok-123")
    path = tmp_path / "config.yaml"
    path.write_text("github:\n  token: '${MY_TOKEN}'\n")

    config = load_config(path)

    assert config.github.token == "tok-123"
    assert config.github_token_resolved == "tok-123"


def test_token_from_env_when_placeholder_unresolved(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("UNSET_VAR", raising=False)
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    path = tmp_path / "config.yaml"
    path.write_text("github:\n  token: '${UNSET_VAR}'\n")

    config = load_config(path)

    assert config.github_token_resolved == "env-token"


def test_webhook_secret_from_file(tmp_path: Path) -> None:
    secret_file = tmp_path / "secret"
    secret_file.write_text("from-file\n")
    config = AppConfig(github=GitHubConfig(webhook_secret=""))

    with patch("changeset_bot.config._current_env", {"WEBHOOK_SECRET_FILE": str(secret_file)}):
        assert config.webhook_secret_resolved == "from-file"


def test_webhook_secret_empty_when_unset() -> None:
    config = AppConfig(github=GitHubConfig(webhook_secret="${WEBHOOK_SECRET}"))

    with patch("changeset_bot.config._current_env", {}):
        assert config.webhook_secret_resolved == ""


def test_example_config_loads() -> None:
    example = Path(__file__).resolve().parent.parent / "config.example.yaml"
    config = load_config(example)

    assert config.bot.known_logins_set == DEFAULT_BOT_LOGINS
