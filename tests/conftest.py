"""Shared pytest configuration and fixtures for all tests."""

import json
import shutil
import subprocess
from pathlib import Path

import pytest

from linelink.api.errors import QueryFailed
from linelink.api.repo.Remote import Remote


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with fake ports")
    config.addinivalue_line("markers", "integration: tests running git or the CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


class FakeVersionControl:
    """In-memory version-control port.

    ``root`` is the repository root (None: nothing is a repository). Every
    query raises ``error`` when it is set.
    """

    def __init__(self, root: Path | None = None, remotes: list[Remote] | None = None, error: Exception | None = None):
        self.root = root
        self.remotes = list(remotes or [])
        self.error = error
        self.calls: list[tuple[str, Path]] = []

    def is_repository(self, directory: Path) -> bool:
        self._record("is_repository", directory)
        return self.root is not None and Path(directory).is_relative_to(self.root)

    def list_remotes(self, directory: Path) -> list[Remote]:
        self._record("list_remotes", directory)
        return list(self.remotes)

    def repository_root(self, directory: Path) -> Path:
        self._record("repository_root", directory)
        assert self.root is not None
        return self.root

    def _record(self, name: str, directory: Path) -> None:
        self.calls.append((name, Path(directory)))
        if self.error is not None:
            raise self.error


def origin(url: str = "https://example.com/r.git") -> Remote:
    return Remote(name="origin", fetch_url=url, push_url=url)


def failing_vcs() -> FakeVersionControl:
    return FakeVersionControl(error=QueryFailed("git: command not found"))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def linelink_home(tmp_path_factory, monkeypatch) -> Path:
    """Point LINELINK_HOME at an empty temporary directory."""
    home = tmp_path_factory.mktemp("linelink_home")
    monkeypatch.setenv("LINELINK_HOME", str(home))
    return home


@pytest.fixture
def write_config(linelink_home: Path):
    """Return a function writing ``config.json`` into LINELINK_HOME."""

    def _write(data: dict) -> Path:
        path = linelink_home / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """A five-line text file outside any repository."""
    path = tmp_path / "plain" / "notes.txt"
    path.parent.mkdir(parents=True)
    path.write_text("one\ntwo\nthree\nfour\nfive\n", encoding="utf-8")
    return path


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A git repository with an origin remote and ``src/a.txt``."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    subprocess.run(["git", "init"], cwd=repo_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "remote", "add", "origin", "https://example.com/r.git"],
        cwd=repo_path,
        capture_output=True,
        check=True,
    )
    source = repo_path / "src" / "a.txt"
    source.parent.mkdir()
    source.write_text("alpha\nbeta\ngamma\n", encoding="utf-8")
    return repo_path
