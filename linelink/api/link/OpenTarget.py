from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class OpenTarget:
    """Where an opened link points: a file and a 0-based line index."""

    target_path: Path
    line_index: int
