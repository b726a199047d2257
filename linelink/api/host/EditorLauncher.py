"""Launch an external editor at a line."""

import os
import shlex
import subprocess
from pathlib import Path

from ..errors import TargetNotFound


class EditorLauncher:
    """Start an editor on a file with the cursor on a given line.

    ``command`` is a template whose items may contain ``{path}`` and
    ``{line}`` (1-based). Without a template, ``$VISUAL`` or ``$EDITOR`` is
    started as ``<editor> +<line> <path>``.
    """

    def __init__(self, command: list[str] | None = None):
        self.command = list(command or [])

    def launch(self, path: Path, line_index: int) -> list[str]:
        """Start the editor without waiting for it and return the command used."""
        args = self.build_command(path, line_index)
        try:
            subprocess.Popen(args)
        except OSError as exc:
            raise TargetNotFound(f"Cannot start editor {args[0]!r}: {exc}") from exc
        return args

    def build_command(self, path: Path, line_index: int) -> list[str]:
        values = {"path": str(path), "line": str(line_index + 1)}
        if self.command:
            return [item.format(**values) for item in self.command]

        editor = os.environ.get("VISUAL") or os.environ.get("EDITOR")
        if not editor:
            raise TargetNotFound("No editor configured: set link.editor_command, $VISUAL or $EDITOR")
        return [*shlex.split(editor), f"+{values['line']}", values["path"]]
