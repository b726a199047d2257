"""Serialize a (path, line) pair into a link string."""

from pathlib import PurePath
from urllib.parse import urlencode

from ...constants import DEFAULT_SCHEME
from .link_prefix import link_prefix
from .looks_like_windows_drive import looks_like_windows_drive


def encode_link(
    path: str | PurePath,
    line: int,
    scheme: str = DEFAULT_SCHEME,
    repository: str | None = None,
    relative_path: str | None = None,
) -> str:
    """Build ``<scheme>://file/<path>:<line>``.

    The path is used verbatim apart from the leading ``/`` of a POSIX absolute
    path, which the prefix already supplies. The slash stays when the rest of
    the path would read as a drive path or another absolute path. When both
    ``repository`` and ``relative_path`` are given they are appended as
    ``?repo=...&path=...``.

    Args:
        path: Absolute path of the file.
        line: 1-based line number.
        scheme: Scheme of the application consuming the link.
        repository: Repository identifier (origin push URL or workspace name).
        relative_path: Path of the file relative to the repository root.

    Raises:
        ValueError: If ``line`` is not a positive integer.
    """
    if isinstance(line, bool) or not isinstance(line, int) or line < 1:
        raise ValueError(f"Line must be a positive integer, got {line!r}")

    target = str(path)
    rest = target[1:]
    # "/c:/x" and "//srv/share" keep their slash so they decode unchanged
    if target.startswith("/") and not rest.startswith("/") and not looks_like_windows_drive(rest):
        target = rest

    link = f"{link_prefix(scheme)}{target}:{line}"
    if repository and relative_path:
        link += "?" + urlencode({"repo": repository, "path": relative_path})
    return link
