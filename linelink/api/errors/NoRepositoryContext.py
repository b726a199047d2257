from .LinkError import LinkError


class NoRepositoryContext(LinkError):
    """File is outside any resolvable repository or workspace folder."""
