"""Pytest configuration and shared fixtures.

- Ensures the project root is available on ``sys.path`` for imports.
- Applies a per-test SIGALRM timeout so a hanging subprocess cannot stall CI.
- Drops root logging handlers a test added and restores the UI language.
- Provides an in-memory ``FakeVcs`` and settings/context factories.
"""

import logging
import os
import signal
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from projkit import i18n  # noqa: E402
from projkit.exceptions import MissingDependencyError, RemoteNotConfiguredError  # noqa: E402
from projkit.pipeline.steps import SetupContext  # noqa: E402
from projkit.settings import SetupSettings  # noqa: E402

_TEST_TIMEOUT = int(os.environ.get("PYTEST_TEST_TIMEOUT", "30"))


def _timeout_handler(signum, frame):
    """Test Timeout handler."""
    raise TimeoutError(f"Test exceeded {_TEST_TIMEOUT} seconds timeout")


def pytest_runtest_setup(item):
    """Arm the per-test timeout where SIGALRM exists."""
    if hasattr(signal, "SIGALRM"):
        signal.signal(signal.SIGALRM, _timeout_handler)
        signal.alarm(_TEST_TIMEOUT)


def pytest_runtest_teardown(item, nextitem):
    """Disarm the per-test timeout."""
    if hasattr(signal, "SIGALRM"):
        signal.alarm(0)


@pytest.fixture(autouse=True)
def _restore_global_state(monkeypatch):
    """Undo root-logger and language changes made by the CLI under test."""
    monkeypatch.delenv("LANG_UI", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    for key in list(os.environ):
        if key.startswith("PROJKIT_"):
            monkeypatch.delenv(key)
    handlers = logging.root.handlers[:]
    level = logging.root.level
    lang = i18n.LANG
    yield
    for h in logging.root.handlers[:]:
        if h in handlers:
            continue
        logging.root.removeHandler(h)
        if isinstance(h, logging.FileHandler):
            h.close()
    logging.root.setLevel(level)
    i18n.LANG = lang


class FakeVcs:
    """In-memory stand-in for :class:`projkit.vcs.GitCli`.

    Records every call in ``calls``. ``failures`` maps an operation name to
    the exception it should raise. ``git lfs track`` writes a
    ``.gitattributes`` file, like the real tool.
    """

    def __init__(self):
        self.calls = []
        self.failures = {}
        self.remotes = {}
        self.pushed = []

    def _call(self, op, *args):
        self.calls.append((op, *args))
        if op in self.failures:
            raise self.failures[op]

    @property
    def operations(self):
        return [call[0] for call in self.calls]

    def init(self, path, branch):
        self._call("init", path, branch)

    def track_large_files(self, path, pattern):
        self._call("track_large_files", path, pattern)
        (path / ".gitattributes").write_text(
            f"{pattern} filter=lfs diff=lfs merge=lfs -text\n", encoding="utf-8"
        )

    def add(self, path, files):
        self._call("add", path, list(files))

    def commit(self, path, message):
        self._call("commit", path, message)

    def has_remote(self, path, name):
        return name in self.remotes

    def add_remote(self, path, name, url):
        self._call("add_remote", path, name, url)
        self.remotes[name] = url

    def push(self, path, remote, branch):
        self._call("push", path, remote, branch)
        if remote not in self.remotes:
            raise RemoteNotConfiguredError(
                f"No remote named '{remote}' is configured", context={"remote": remote}
            )
        self.pushed.append((remote, branch))


@pytest.fixture
def fake_vcs():
    """Return a FakeVcs with ``origin`` configured."""
    vcs = FakeVcs()
    vcs.remotes["origin"] = "https://example.test/repo.git"
    return vcs


@pytest.fixture
def missing_git():
    """Return the error a FakeVcs raises when git is not installed."""
    return MissingDependencyError("Git executable 'git' not found")


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    """Create a small binary template document outside the work directory."""
    template_dir = tmp_path / "templates"
    template_dir.mkdir()
    template = template_dir / "template.blend"
    template.write_bytes(b"BLENDER-v300\x00\x01binary")
    return template


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Return an empty directory to create projects in."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def settings(template_file: Path) -> SetupSettings:
    return SetupSettings(template_path=template_file)


@pytest.fixture
def make_ctx(workdir: Path, settings: SetupSettings, fake_vcs):
    """Factory building a SetupContext for the given positional args."""

    def _make(*args, **overrides):
        values = {
            "args": tuple(args),
            "workdir": workdir,
            "settings": settings,
            "vcs": fake_vcs,
        }
        values.update(overrides)
        return SetupContext(**values)

    return _make
