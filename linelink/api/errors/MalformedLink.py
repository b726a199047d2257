from .LinkError import LinkError


class MalformedLink(LinkError):
    """Link string does not follow the link grammar."""
