"""Document loading port used by the open command."""

from pathlib import Path
from typing import Protocol

from .LineView import LineView


class DocumentLoader(Protocol):
    """Load a document and focus a 0-based line.

    Raises TargetNotFound when the document or line cannot be loaded.
    """

    def load(self, path: Path, line_index: int) -> LineView: ...
