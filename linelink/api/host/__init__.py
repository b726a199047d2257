"""Host integration ports: clipboard, document loading, editor launching."""

from .ClipboardSink import ClipboardSink
from .DocumentLoader import DocumentLoader
from .EditorLauncher import EditorLauncher
from .FileDocumentLoader import FileDocumentLoader
from .LineView import LineView
from .SystemClipboard import SystemClipboard

__all__ = [
    "ClipboardSink",
    "DocumentLoader",
    "EditorLauncher",
    "FileDocumentLoader",
    "LineView",
    "SystemClipboard",
]
