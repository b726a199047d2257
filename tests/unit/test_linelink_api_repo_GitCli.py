"""Tests for GitCli with subprocess patched."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from linelink.api.errors import QueryFailed
from linelink.api.repo.GitCli import GitCli
from linelink.api.repo.Remote import Remote


def _completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=["git"], returncode=returncode, stdout=stdout, stderr=stderr)


def test_is_repository_true():
    with patch("subprocess.run", return_value=_completed("true\n")) as run:
        assert GitCli().is_repository(Path("/repo/src")) is True
    args, kwargs = run.call_args
    assert args[0] == ["git", "rev-parse", "--is-inside-work-tree"]
    assert kwargs["cwd"] == Path("/repo/src")
    assert kwargs["timeout"] == 5.0


def test_is_repository_false_outside_work_tree():
    not_repo = _completed(returncode=128, stderr="fatal: not a git repository")
    with patch("subprocess.run", return_value=not_repo):
        assert GitCli().is_repository(Path("/tmp")) is False


def test_is_repository_false_inside_git_dir():
    with patch("subprocess.run", return_value=_completed("false\n")):
        assert GitCli().is_repository(Path("/repo/.git")) is False


def test_list_remotes_parses_fetch_and_push():
    output = (
        "origin\thttps://example.com/r.git (fetch)\n"
        "origin\tgit@example.com:r.git (push)\n"
        "upstream\thttps://example.com/up.git (fetch)\n"
        "upstream\thttps://example.com/up.git (push)\n"
    )
    with patch("subprocess.run", return_value=_completed(output)):
        remotes = GitCli().list_remotes(Path("/repo"))

    assert remotes == [
        Remote(name="origin", fetch_url="https://example.com/r.git", push_url="git@example.com:r.git"),
        Remote(name="upstream", fetch_url="https://example.com/up.git", push_url="https://example.com/up.git"),
    ]


def test_list_remotes_empty():
    with patch("subprocess.run", return_value=_completed("")):
        assert GitCli().list_remotes(Path("/repo")) == []


def test_list_remotes_failure_is_query_failed():
    with patch("subprocess.run", return_value=_completed(returncode=1, stderr="boom")):
        with pytest.raises(QueryFailed, match="boom"):
            GitCli().list_remotes(Path("/repo"))


def test_repository_root():
    with patch("subprocess.run", return_value=_completed("/repo\n")):
        assert GitCli().repository_root(Path("/repo/src")) == Path("/repo")


def test_repository_root_failure_is_query_failed():
    with patch("subprocess.run", return_value=_completed(returncode=128)):
        with pytest.raises(QueryFailed, match="exit code 128"):
            GitCli().repository_root(Path("/repo/src"))


@pytest.mark.parametrize(
    "error",
    [
        FileNotFoundError("git"),
        PermissionError("denied"),
        subprocess.TimeoutExpired(cmd="git", timeout=5),
    ],
)
def test_run_errors_are_query_failed(error):
    with patch("subprocess.run", side_effect=error):
        with pytest.raises(QueryFailed):
            GitCli().is_repository(Path("/repo"))


def test_custom_executable_and_timeout():
    with patch("subprocess.run", return_value=_completed("true\n")) as run:
        GitCli(executable="/opt/git/bin/git", timeout_secs=1.5).is_repository(Path("/repo"))
    args, kwargs = run.call_args
    assert args[0][0] == "/opt/git/bin/git"
    assert kwargs["timeout"] == 1.5
