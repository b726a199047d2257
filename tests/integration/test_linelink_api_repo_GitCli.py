"""GitCli and RepositoryResolver against real git repositories."""

import subprocess

import pytest

from linelink.api.config.WorkspaceFolder import WorkspaceFolder
from linelink.api.errors import NoRepositoryContext, QueryFailed
from linelink.api.repo.GitCli import GitCli
from linelink.api.repo.RepositoryKind import RepositoryKind
from linelink.api.repo.RepositoryResolver import RepositoryResolver

# Real git subprocesses
pytestmark = pytest.mark.timeout(30)


def test_is_repository(git_repo, tmp_path_factory):
    git = GitCli()
    assert git.is_repository(git_repo / "src") is True
    assert git.is_repository(tmp_path_factory.mktemp("not_a_repo")) is False


def test_list_remotes(git_repo):
    remotes = GitCli().list_remotes(git_repo)
    assert [remote.name for remote in remotes] == ["origin"]
    assert remotes[0].fetch_url == "https://example.com/r.git"
    assert remotes[0].push_url == "https://example.com/r.git"


def test_list_remotes_separate_push_url(git_repo):
    subprocess.run(
        ["git", "remote", "set-url", "--push", "origin", "git@example.com:r.git"],
        cwd=git_repo,
        capture_output=True,
        check=True,
    )
    (remote,) = GitCli().list_remotes(git_repo)
    assert remote.fetch_url == "https://example.com/r.git"
    assert remote.push_url == "git@example.com:r.git"


def test_repository_root(git_repo):
    assert GitCli().repository_root(git_repo / "src").resolve() == git_repo.resolve()


def test_repository_root_outside_repository(tmp_path_factory):
    with pytest.raises(QueryFailed, match="rev-parse --show-toplevel"):
        GitCli().repository_root(tmp_path_factory.mktemp("not_a_repo"))


def test_missing_executable(git_repo):
    with pytest.raises(QueryFailed):
        GitCli(executable="definitely-not-git-xyz").is_repository(git_repo)


def test_resolver_git(git_repo):
    info = RepositoryResolver(GitCli()).resolve(git_repo / "src" / "a.txt")
    assert info.kind is RepositoryKind.GIT
    assert info.identifier == "https://example.com/r.git"
    assert info.relative_path == "src/a.txt"


def test_resolver_without_origin_falls_back_to_workspace(git_repo):
    subprocess.run(["git", "remote", "remove", "origin"], cwd=git_repo, capture_output=True, check=True)
    folders = [WorkspaceFolder(name="local", root=str(git_repo))]

    info = RepositoryResolver(GitCli(), folders).resolve(git_repo / "src" / "a.txt")

    assert info.kind is RepositoryKind.WORKSPACE
    assert info.identifier == "local"
    assert info.relative_path == "src/a.txt"


def test_resolver_without_origin_or_workspace(git_repo):
    subprocess.run(["git", "remote", "remove", "origin"], cwd=git_repo, capture_output=True, check=True)
    with pytest.raises(NoRepositoryContext):
        RepositoryResolver(GitCli()).resolve(git_repo / "src" / "a.txt")
