"""Configuration models and commands."""

from .GitConfig import GitConfig
from .LinelinkConfig import LinelinkConfig
from .LinkConfig import LinkConfig
from .LogConfig import LogConfig
from .WorkspaceConfig import WorkspaceConfig
from .WorkspaceFolder import WorkspaceFolder

__all__ = [
    "GitConfig",
    "LinelinkConfig",
    "LinkConfig",
    "LogConfig",
    "WorkspaceConfig",
    "WorkspaceFolder",
]
