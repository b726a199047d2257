"""Version-control queries backed by the git command line."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from ..errors import QueryFailed
from .Remote import Remote

logger = logging.getLogger(__name__)


class GitCli:
    """Answer repository queries by running ``git`` in the file's directory."""

    def __init__(self, executable: str = "git", timeout_secs: float = 5.0):
        self.executable = executable
        self.timeout_secs = timeout_secs

    def is_repository(self, directory: Path) -> bool:
        """Check if ``directory`` is inside a git work tree."""
        result = self._run(["rev-parse", "--is-inside-work-tree"], directory)
        return result.returncode == 0 and result.stdout.strip() == "true"

    def list_remotes(self, directory: Path) -> list[Remote]:
        """List configured remotes with their fetch and push URLs."""
        result = self._run(["remote", "-v"], directory)
        self._check(result, "remote -v", directory)

        fetch_urls: dict[str, str] = {}
        push_urls: dict[str, str] = {}
        for line in result.stdout.splitlines():
            # Format: "<name>\t<url> (fetch|push)"
            parts = line.split()
            if len(parts) < 3:
                continue
            name, url, kind = parts[0], parts[1], parts[2]
            if kind == "(fetch)":
                fetch_urls[name] = url
            elif kind == "(push)":
                push_urls[name] = url

        names = list(dict.fromkeys([*fetch_urls, *push_urls]))
        return [
            Remote(
                name=name,
                fetch_url=fetch_urls.get(name, push_urls.get(name, "")),
                push_url=push_urls.get(name, fetch_urls.get(name, "")),
            )
            for name in names
        ]

    def repository_root(self, directory: Path) -> Path:
        """Return the top-level directory of the work tree."""
        result = self._run(["rev-parse", "--show-toplevel"], directory)
        self._check(result, "rev-parse --show-toplevel", directory)
        return Path(result.stdout.strip())

    def _run(self, args: list[str], directory: Path) -> subprocess.CompletedProcess[str]:
        try:
            return subprocess.run(
                [self.executable, *args],
                cwd=directory,
                capture_output=True,
                text=True,
                timeout=self.timeout_secs,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug(f"git {' '.join(args)} failed in {directory}: {exc}")
            raise QueryFailed(f"git {' '.join(args)} failed in {directory}: {exc}") from exc

    @staticmethod
    def _check(result: subprocess.CompletedProcess[str], command: str, directory: Path) -> None:
        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
            logger.debug(f"git {command} failed in {directory}: {detail}")
            raise QueryFailed(f"git {command} failed in {directory}: {detail}")
