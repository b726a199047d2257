from typing import Protocol


class ClipboardSink(Protocol):
    """Receives generated links. Raises OSError when the clipboard is unavailable."""

    def write(self, text: str) -> None: ...
