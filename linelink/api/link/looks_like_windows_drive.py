import re

_WINDOWS_DRIVE = re.compile(r"^[A-Za-z]:[\\/]")


def looks_like_windows_drive(target: str) -> bool:
    """Check if ``target`` starts with a drive letter such as ``C:\\`` or ``c:/``."""
    return _WINDOWS_DRIVE.match(target) is not None
