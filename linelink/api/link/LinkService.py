"""Generate and open line links."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from ...constants import DEFAULT_SCHEME
from ..errors import NoActiveContext
from ..repo.RepositoryInfo import RepositoryInfo
from ..repo.RepositoryResolver import RepositoryResolver
from .decode_link import decode_link
from .encode_link import encode_link
from .LineLink import LineLink
from .OpenTarget import OpenTarget

logger = logging.getLogger(__name__)


class LinkService:
    """Façade over RepositoryResolver and the link codec.

    Every failure propagates to the caller unchanged; nothing is retried.
    """

    def __init__(
        self,
        resolver: RepositoryResolver,
        scheme: str = DEFAULT_SCHEME,
        portable: bool = False,
        checkouts: Mapping[str, str] | None = None,
    ):
        self.resolver = resolver
        self.scheme = scheme
        self.portable = portable
        self.checkouts = dict(checkouts or {})

    def resolve(self, file_path: str | Path) -> RepositoryInfo:
        return self.resolver.resolve(file_path)

    def generate(self, file_path: str | Path | None, line: int) -> str:
        """Return the link for a 1-based ``line`` of ``file_path``."""
        link, _ = self.generate_with_repository(file_path, line)
        return link

    def generate_with_repository(self, file_path: str | Path | None, line: int) -> tuple[str, RepositoryInfo]:
        """Return the link for a 1-based ``line`` of ``file_path`` and its repository context.

        The file must belong to a known repository or workspace folder. The
        link carries the absolute path; portable links also carry the
        repository identifier and relative path.

        Raises:
            NoActiveContext: If there is no current file.
            NoRepositoryContext: If the file has no repository context.
            QueryFailed: If a git query fails.
            ValueError: If ``line`` is not a positive integer.
        """
        if not file_path or not str(file_path).strip():
            raise NoActiveContext("No active file to generate a link for")
        path = Path(file_path).expanduser().absolute()
        if not path.is_file():
            raise NoActiveContext(f"No such file: {path}")

        info = self.resolver.resolve(path)
        logger.debug(f"Generating link for {info.describe()}")
        if self.portable:
            link = encode_link(
                path,
                line,
                scheme=self.scheme,
                repository=info.identifier,
                relative_path=info.relative_path,
            )
        else:
            link = encode_link(path, line, scheme=self.scheme)
        return link, info

    def open(self, link: str) -> OpenTarget:
        """Decode ``link`` into a target path and a 0-based line index.

        Raises:
            MalformedLink: If the link does not follow the link grammar.
        """
        decoded = decode_link(link.strip(), scheme=self.scheme)
        return OpenTarget(target_path=self._local_path(decoded), line_index=decoded.line - 1)

    def _local_path(self, decoded: LineLink) -> Path:
        if decoded.is_portable:
            checkout = self.checkouts.get(decoded.repository or "")
            if checkout:
                logger.info(f"Mapping {decoded.repository} to local checkout {checkout}")
                return Path(checkout).expanduser() / (decoded.relative_path or "")
        return Path(decoded.target)
