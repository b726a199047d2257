"""Base class for linelink failures."""


class LinkError(Exception):
    """Base class for every failure a command reports to the user."""
