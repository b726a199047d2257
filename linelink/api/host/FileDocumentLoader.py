"""Load documents from the local filesystem."""

from pathlib import Path

from ..errors import TargetNotFound
from .LineView import LineView


class FileDocumentLoader:
    """Read a text file and return the focused line with surrounding context."""

    def __init__(self, context_lines: int = 3):
        self.context_lines = context_lines

    def load(self, path: Path, line_index: int) -> LineView:
        if not path.exists():
            raise TargetNotFound(f"File does not exist: {path}")
        if not path.is_file():
            raise TargetNotFound(f"Not a file: {path}")

        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise TargetNotFound(f"Cannot read file {path}: {exc}") from exc

        lines = text.splitlines()
        # Editors show an empty last line after a trailing newline
        if not text or text.endswith(("\n", "\r")):
            lines.append("")
        if line_index < 0 or line_index >= len(lines):
            raise TargetNotFound(f"Line {line_index + 1} is beyond the end of {path} ({len(lines)} lines)")

        start = max(0, line_index - self.context_lines)
        end = min(len(lines), line_index + self.context_lines + 1)
        return LineView(
            path=path,
            line_index=line_index,
            text=lines[line_index],
            start_index=start,
            lines=lines[start:end],
        )
