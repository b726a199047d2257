"""Repository context kinds."""

from enum import Enum


class RepositoryKind(str, Enum):
    GIT = "git"
    WORKSPACE = "workspace"
