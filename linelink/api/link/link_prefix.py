from ...constants import DEFAULT_SCHEME


def link_prefix(scheme: str = DEFAULT_SCHEME) -> str:
    """Return the fixed prefix every link string starts with."""
    return f"{scheme}://file/"
