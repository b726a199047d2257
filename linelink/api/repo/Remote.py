from dataclasses import dataclass


@dataclass(frozen=True)
class Remote:
    """A configured git remote."""

    name: str
    fetch_url: str
    push_url: str
