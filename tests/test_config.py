"""Tests for prcheckout.config (YAML + env loading, token resolution)."""

from pathlib import Path

import pytest

from prcheckout.config import AppConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("GITHUB_TOKEN", "GITHUB_TOKEN_FILE", "GITHUB_REPOSITORY", "CHECKOUT_ALLOW_IF_MAINTAINER_CANNOT_MODIFY"):
        monkeypatch.delenv(key, raising=False)


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    """Nonexistent config file gives default AppConfig."""
    config = load_config(tmp_path / "missing.yaml")
    assert isinstance(config, AppConfig)
    assert config.github.api_url == "https://api.github.com"
    assert config.github.remote == "origin"
    assert config.checkout.allow_if_maintainer_cannot_modify is False
    assert config.logging.level == "INFO"


def test_yaml_values_loaded(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "github:\n"
        "  repository: angular/angular\n"
        "checkout:\n"
        "  allow_if_maintainer_cannot_modify: true\n"
        "  repo_dir: /src/angular\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    config = load_config(path)
    assert config.github.repository == "angular/angular"
    assert config.checkout.allow_if_maintainer_cannot_modify is True
    assert config.checkout.repo_dir == "/src/angular"
    assert config.logging.level == "DEBUG"


def test_env_placeholder_substituted(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """${VAR} in YAML is replaced from the environment."""
    monkeypatch.setenv("MY_TOKEN", "from-env")
    path = tmp_path / "config.yaml"
    path.write_text("github:\n  token: ${MY_TOKEN}\n")
    config = load_config(path)
    assert config.github.token == "from-env"
    assert config.github_token_resolved == "from-env"


def test_token_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "  env-token \n")
    config = load_config(tmp_path / "missing.yaml")
    assert config.github_token_resolved == "env-token"


def test_token_from_secret_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """GITHUB_TOKEN_FILE (Docker secret) is read when no token is set."""
    secret = tmp_path / "token"
    secret.write_text("file-token\n")
    monkeypatch.setenv("GITHUB_TOKEN_FILE", str(secret))
    path = tmp_path / "config.yaml"
    path.write_text("github:\n  token: ${UNSET_TOKEN_VAR}\n")
    config = load_config(path)
    assert config.github_token_resolved == "file-token"


def test_no_token(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.yaml")
    assert config.github_token_resolved is None
