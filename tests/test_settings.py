"""Tests for runtime settings loading in ``projkit.settings``."""

from pathlib import Path

import pytest

from projkit import config
from projkit.exceptions import ConfigurationError
from projkit.settings import SetupSettings, default_ignore_pattern


def test_defaults(tmp_path: Path):
    s = SetupSettings.from_env(tmp_path, environ={})
    assert s.template_path == config.DEFAULT_TEMPLATE_PATH
    assert s.ignore_pattern == "*.blend1"
    assert s.large_file_pattern == "*.blend"
    assert (s.branch, s.remote) == ("main", "origin")
    assert s.commit_message == "Initial commit"
    assert s.error_file_name == "error.txt"
    assert s.remote_url is None and s.log_file is None


def test_bundled_template_exists():
    assert config.DEFAULT_TEMPLATE_PATH.is_file()


def test_environment_overrides(tmp_path: Path):
    env = {
        "PROJKIT_TEMPLATE": str(tmp_path / "base.kra"),
        "PROJKIT_BRANCH": "trunk",
        "PROJKIT_REMOTE": "upstream",
        "PROJKIT_COMMIT_MESSAGE": "Start",
        "PROJKIT_ERROR_FILE": "failure.log",
        "PROJKIT_GIT": "/usr/local/bin/git",
        "PROJKIT_LOG_FILE": str(tmp_path / "dev.log"),
    }
    s = SetupSettings.from_env(tmp_path, environ=env)
    assert s.template_suffix == ".kra"
    assert s.ignore_pattern == "*.kra1"
    assert s.branch == "trunk"
    assert s.remote == "upstream"
    assert s.commit_message == "Start"
    assert s.error_file_name == "failure.log"
    assert s.git_executable == "/usr/local/bin/git"
    assert s.log_file == tmp_path / "dev.log"


def test_env_file_takes_precedence(tmp_path: Path):
    (tmp_path / ".projkit.env").write_text(
        "# local settings\nPROJKIT_BRANCH=develop\nPROJKIT_IGNORE_PATTERN=*.bak\n"
    )
    s = SetupSettings.from_env(tmp_path, environ={"PROJKIT_BRANCH": "trunk"})
    assert s.branch == "develop"
    assert s.ignore_pattern == "*.bak"


def test_remote_url_for_substitutes_project():
    s = SetupSettings(remote_url="https://example.test/team/{project}.git")
    assert s.remote_url_for("Alpha") == "https://example.test/team/Alpha.git"
    assert SetupSettings().remote_url_for("Alpha") is None


def test_template_without_suffix_is_rejected(tmp_path: Path):
    with pytest.raises(ConfigurationError) as excinfo:
        SetupSettings.from_env(tmp_path, environ={"PROJKIT_TEMPLATE": str(tmp_path / "raw")})
    assert excinfo.value.code == "CONFIGURATION_ERROR"


@pytest.mark.parametrize("key", ["PROJKIT_BRANCH", "PROJKIT_REMOTE", "PROJKIT_ERROR_FILE"])
def test_blank_values_are_rejected(tmp_path: Path, key):
    with pytest.raises(ConfigurationError) as excinfo:
        SetupSettings.from_env(tmp_path, environ={key: "  "})
    assert "must not be empty" in excinfo.value.message


def test_settings_are_immutable():
    s = SetupSettings()
    with pytest.raises(AttributeError):
        s.branch = "other"


def test_default_ignore_pattern():
    assert default_ignore_pattern(Path("scene.blend")) == "*.blend1"
