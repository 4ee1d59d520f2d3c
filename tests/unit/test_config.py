"""
Tests for settings loading and the per-user .env writer.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from steamid_resolver.core.config import (
    ResolverSettings,
    get_user_config_dir,
    read_user_env_vars,
    write_user_env_vars,
)


class TestResolverSettings:
    def test_defaults(self) -> None:
        settings = ResolverSettings(_env_file=None)
        assert settings.base_url == "https://steamcommunity.com"
        assert settings.max_retries == 3
        assert settings.retry_base_delay_seconds == 1.0
        assert settings.debug is False

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STEAMID_RESOLVER_MAX_RETRIES", "5")
        monkeypatch.setenv("STEAMID_RESOLVER_HTTP_TIMEOUT_SECONDS", "2.5")

        settings = ResolverSettings(_env_file=None)

        assert settings.max_retries == 5
        assert settings.http_timeout_seconds == 2.5

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("STEAMID_RESOLVER_USER_AGENT=from-file\n", encoding="utf-8")

        settings = ResolverSettings(_env_file=env_file)

        assert settings.user_agent == "from-file"

    @pytest.mark.parametrize("retries", [0, 11])
    def test_max_retries_bounds(self, retries: int) -> None:
        with pytest.raises(ValidationError):
            ResolverSettings(_env_file=None, max_retries=retries)


class TestUserEnvFile:
    def test_xdg_config_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr("sys.platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_user_config_dir() == tmp_path / "steamid-resolver"

    def test_write_creates_file(self, tmp_path: Path) -> None:
        env_path = tmp_path / "nested" / ".env"

        out = write_user_env_vars({"STEAMID_RESOLVER_MAX_RETRIES": "4"}, env_path=env_path)

        assert out == env_path
        assert env_path.read_text(encoding="utf-8").startswith("#")
        assert read_user_env_vars(env_path) == {"STEAMID_RESOLVER_MAX_RETRIES": "4"}

    def test_write_updates_in_place(self, tmp_path: Path) -> None:
        env_path = tmp_path / ".env"
        env_path.write_text(
            '# comment\nSTEAMID_RESOLVER_USER_AGENT="old agent"\nSTEAMID_RESOLVER_DEBUG=true\n',
            encoding="utf-8",
        )

        write_user_env_vars(
            {"STEAMID_RESOLVER_USER_AGENT": "new agent", "STEAMID_RESOLVER_BASE_URL": None},
            env_path=env_path,
        )

        assert env_path.read_text(encoding="utf-8").startswith("# comment\n")
        assert read_user_env_vars(env_path) == {
            "STEAMID_RESOLVER_USER_AGENT": "new agent",
            "STEAMID_RESOLVER_DEBUG": "true",
        }

    def test_read_missing_file(self, tmp_path: Path) -> None:
        assert read_user_env_vars(tmp_path / "missing.env") == {}

    def test_written_file_feeds_settings(self, tmp_path: Path) -> None:
        env_path = write_user_env_vars(
            {"STEAMID_RESOLVER_USER_AGENT": "Mozilla/5.0 (compatible; test)"},
            env_path=tmp_path / ".env",
        )

        settings = ResolverSettings(_env_file=env_path)

        assert settings.user_agent == "Mozilla/5.0 (compatible; test)"
