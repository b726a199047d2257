"""Version-control query port used by RepositoryResolver."""

from pathlib import Path
from typing import Protocol

from .Remote import Remote


class VersionControl(Protocol):
    """Read-only queries against a version-control system.

    Every method may raise QueryFailed when the directory is inaccessible or
    the underlying tool cannot run.
    """

    def is_repository(self, directory: Path) -> bool: ...

    def list_remotes(self, directory: Path) -> list[Remote]: ...

    def repository_root(self, directory: Path) -> Path: ...
