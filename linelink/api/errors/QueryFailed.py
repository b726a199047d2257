from .LinkError import LinkError


class QueryFailed(LinkError):
    """A version-control query errored (missing binary, permissions, timeout)."""
