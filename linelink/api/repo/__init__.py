"""Repository context resolution."""

from .GitCli import GitCli
from .Remote import Remote
from .RepositoryInfo import RepositoryInfo
from .RepositoryKind import RepositoryKind
from .RepositoryResolver import RepositoryResolver
from .VersionControl import VersionControl

__all__ = [
    "GitCli",
    "Remote",
    "RepositoryInfo",
    "RepositoryKind",
    "RepositoryResolver",
    "VersionControl",
]
