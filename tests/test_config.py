from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import DEFAULT_QUERY_URL, PathfinderSettings, get_user_config_dir, write_user_env_vars


def test_defaults(monkeypatch):
    monkeypatch.delenv("PATHFINDER_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("PATHFINDER_QUERY_URL", raising=False)

    settings = PathfinderSettings(_env_file=None)

    assert settings.query_url == DEFAULT_QUERY_URL
    assert settings.access_token is None
    assert settings.default_page_limit == 25


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("PATHFINDER_ACCESS_TOKEN", "from-env")
    monkeypatch.setenv("PATHFINDER_HTTP_TIMEOUT_SECONDS", "3.5")

    settings = PathfinderSettings(_env_file=None)

    assert settings.access_token == "from-env"
    assert settings.http_timeout_seconds == 3.5


def test_rejects_bad_values():
    with pytest.raises(ValidationError):
        PathfinderSettings(_env_file=None, http_timeout_seconds=0)
    with pytest.raises(ValidationError):
        PathfinderSettings(_env_file=None, default_page_limit=51)


def test_env_file_is_read(tmp_path, monkeypatch):
    monkeypatch.delenv("PATHFINDER_ACCESS_TOKEN", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("PATHFINDER_ACCESS_TOKEN=file-token\n", encoding="utf-8")

    assert PathfinderSettings(_env_file=env_file).access_token == "file-token"


def test_write_user_env_vars_merges(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# old\nPATHFINDER_CLIENT_TOKEN=keep\nPATHFINDER_ACCESS_TOKEN=old\n", encoding="utf-8")

    written = write_user_env_vars(
        {"PATHFINDER_ACCESS_TOKEN": "new", "PATHFINDER_CLIENT_TOKEN": None},
        env_path=env_path,
    )

    assert written == env_path
    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[1:] == ["PATHFINDER_ACCESS_TOKEN=new", "PATHFINDER_CLIENT_TOKEN=keep"]


def test_user_config_dir_honours_xdg(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "pathfinder-client"
