"""Decoded link value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineLink:
    """A pointer to a 1-based line of a file.

    ``repository`` and ``relative_path`` are only set for portable links, which
    also carry the repository identifier and the root-relative path.
    """

    target: str
    line: int
    repository: str | None = None
    relative_path: str | None = None

    @property
    def is_portable(self) -> bool:
        return self.repository is not None and self.relative_path is not None
