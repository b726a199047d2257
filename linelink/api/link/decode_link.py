"""Parse a link string back into a LineLink."""

import re
from urllib.parse import parse_qs

from ...constants import DEFAULT_SCHEME
from ..errors import MalformedLink
from .LineLink import LineLink
from .link_prefix import link_prefix
from .looks_like_windows_drive import looks_like_windows_drive

_DIGITS = re.compile(r"[0-9]+")


def decode_link(link: str, scheme: str = DEFAULT_SCHEME) -> LineLink:
    """Parse ``<scheme>://file/<path>`` with a ``:<line>`` or ``?line=<line>`` suffix.

    Both suffix styles are accepted. When both are present the ``line`` query
    parameter wins and the inline suffix is dropped from the target.

    Raises:
        MalformedLink: If the prefix is wrong, the path or line is missing, or
            the line is not a positive integer.
    """
    prefix = link_prefix(scheme)
    if not isinstance(link, str) or not link.startswith(prefix):
        raise MalformedLink(f"Link must start with '{prefix}': {link!r}")

    body = link[len(prefix) :]
    path_part, _, query = body.partition("?")
    params = parse_qs(query, keep_blank_values=True)

    target, inline_line = _split_inline_line(path_part)
    if "line" in params:
        line = _parse_line(params["line"][-1])
    elif inline_line is not None:
        line = _parse_line(inline_line)
    else:
        raise MalformedLink(f"Link has no line number: {link!r}")

    if not target:
        raise MalformedLink(f"Link has no file path: {link!r}")
    if not target.startswith("/") and not looks_like_windows_drive(target):
        target = "/" + target

    repository = params.get("repo", [None])[-1] or None
    relative_path = params.get("path", [None])[-1] or None
    if repository is None or relative_path is None:
        repository = relative_path = None

    return LineLink(target=target, line=line, repository=repository, relative_path=relative_path)


def _split_inline_line(path_part: str) -> tuple[str, str | None]:
    head, sep, tail = path_part.rpartition(":")
    if sep and _DIGITS.fullmatch(tail):
        return head, tail
    return path_part, None


def _parse_line(value: str) -> int:
    if not _DIGITS.fullmatch(value):
        raise MalformedLink(f"Line number must be a positive integer, got {value!r}")
    try:
        line = int(value)
    except ValueError as exc:
        # Digit strings beyond the interpreter's conversion limit
        raise MalformedLink(f"Line number is too long: {len(value)} digits") from exc
    if line < 1:
        raise MalformedLink(f"Line number must be at least 1, got {line}")
    return line
