from .LinkError import LinkError


class TargetNotFound(LinkError):
    """Link target cannot be loaded (missing file or line past the end)."""
