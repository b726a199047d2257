from .LinkError import LinkError


class NoActiveContext(LinkError):
    """No current file (or cursor line) to generate a link from."""
