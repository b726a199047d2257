"""Resolved repository context of a file."""

from dataclasses import dataclass
from typing import Any, assert_never

from .RepositoryKind import RepositoryKind


@dataclass(frozen=True)
class RepositoryInfo:
    """Where a file lives: a git repository or a workspace folder.

    ``identifier`` is the origin push URL for git repositories and the folder
    name for workspaces. ``relative_path`` always uses forward slashes.
    """

    kind: RepositoryKind
    identifier: str
    relative_path: str

    def describe(self) -> str:
        """Return a one-line human description."""
        if self.kind is RepositoryKind.GIT:
            return f"{self.relative_path} in git repository {self.identifier}"
        if self.kind is RepositoryKind.WORKSPACE:
            return f"{self.relative_path} in workspace folder '{self.identifier}'"
        assert_never(self.kind)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "identifier": self.identifier,
            "relative_path": self.relative_path,
        }
