"""Line-focused view of a loaded document."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class LineView:
    """The focused line of a document plus the lines around it.

    ``line_index`` and ``start_index`` are 0-based; ``lines`` starts at
    ``start_index``.
    """

    path: Path
    line_index: int
    text: str
    start_index: int
    lines: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "line": self.line_index + 1,
            "line_index": self.line_index,
            "text": self.text,
            "context_start": self.start_index + 1,
            "context": list(self.lines),
        }
