"""Clipboard access through the platform's clipboard tool."""

import os
import platform
import shutil
import subprocess


class SystemClipboard:
    """Copy text by piping it to pbcopy, clip, wl-copy, xclip or xsel."""

    def __init__(self, timeout_secs: float = 5.0):
        self.timeout_secs = timeout_secs

    def write(self, text: str) -> None:
        """Copy ``text`` to the clipboard.

        Raises:
            OSError: If no clipboard tool is available or it fails.
        """
        command = self._command()
        try:
            subprocess.run(command, input=text, text=True, check=True, timeout=self.timeout_secs)
        except subprocess.SubprocessError as exc:
            raise OSError(f"{command[0]} failed: {exc}") from exc

    @staticmethod
    def _command() -> list[str]:
        system = platform.system().lower()
        if system == "darwin":
            candidates = [["pbcopy"]]
        elif system == "windows":
            candidates = [["clip"]]
        else:
            candidates = [["xclip", "-selection", "clipboard"], ["xsel", "--clipboard", "--input"]]
            if os.environ.get("WAYLAND_DISPLAY"):
                candidates.insert(0, ["wl-copy"])

        for candidate in candidates:
            if shutil.which(candidate[0]):
                return candidate
        raise OSError(f"No clipboard tool found (tried {', '.join(c[0] for c in candidates)})")
