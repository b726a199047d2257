"""Failures raised by linelink components and reported by commands."""

from .LinkError import LinkError
from .MalformedLink import MalformedLink
from .NoActiveContext import NoActiveContext
from .NoRepositoryContext import NoRepositoryContext
from .QueryFailed import QueryFailed
from .TargetNotFound import TargetNotFound
from .describe_error import describe_error

__all__ = [
    "LinkError",
    "MalformedLink",
    "NoActiveContext",
    "NoRepositoryContext",
    "QueryFailed",
    "TargetNotFound",
    "describe_error",
]
