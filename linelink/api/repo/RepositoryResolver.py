"""Resolve the repository context of a file."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from ...constants import ORIGIN_REMOTE
from ..config.WorkspaceFolder import WorkspaceFolder
from ..errors import NoRepositoryContext
from .normalize_relative_path import normalize_relative_path
from .RepositoryInfo import RepositoryInfo
from .RepositoryKind import RepositoryKind
from .VersionControl import VersionControl

logger = logging.getLogger(__name__)


class RepositoryResolver:
    """Find the git repository or workspace folder a file belongs to.

    Workspace folders are tried in configured order and the first folder whose
    root contains the file is used. A file outside every folder has no
    workspace context.

    Results are computed on every call; a repository's remotes or root may
    change between calls.
    """

    def __init__(self, vcs: VersionControl, folders: Sequence[WorkspaceFolder] = ()):
        self.vcs = vcs
        self.folders = list(folders)

    def resolve(self, file_path: str | Path) -> RepositoryInfo:
        """Resolve ``file_path`` to a git repository, else a workspace folder.

        A git repository without an ``origin`` remote falls through to the
        workspace folders. QueryFailed from the version-control port propagates.

        Raises:
            NoRepositoryContext: If neither git nor any workspace folder applies.
        """
        path = Path(file_path).expanduser().absolute()
        directory = path.parent

        info = self._resolve_git(path, directory)
        if info is None:
            info = self._resolve_workspace(path)
        if info is None:
            raise NoRepositoryContext(f"Could not determine repository information for {path}")
        return info

    def _resolve_git(self, path: Path, directory: Path) -> RepositoryInfo | None:
        if not self.vcs.is_repository(directory):
            return None

        remotes = self.vcs.list_remotes(directory)
        origin = next((remote for remote in remotes if remote.name == ORIGIN_REMOTE), None)
        if origin is None:
            logger.info(f"Repository at {directory} has no '{ORIGIN_REMOTE}' remote; trying workspace folders")
            return None

        root = self.vcs.repository_root(directory)
        # git reports the root with symlinks resolved
        relative_path = os.path.relpath(path.resolve(), root.resolve())
        return RepositoryInfo(
            kind=RepositoryKind.GIT,
            identifier=origin.push_url,
            relative_path=normalize_relative_path(relative_path),
        )

    def _resolve_workspace(self, path: Path) -> RepositoryInfo | None:
        resolved = path.resolve()
        for folder in self.folders:
            root = folder.path.absolute().resolve()
            if not resolved.is_relative_to(root):
                continue
            logger.info(f"Using workspace folder '{folder.name}' for {path}")
            return RepositoryInfo(
                kind=RepositoryKind.WORKSPACE,
                identifier=folder.name,
                relative_path=normalize_relative_path(resolved.relative_to(root).as_posix()),
            )
        return None
