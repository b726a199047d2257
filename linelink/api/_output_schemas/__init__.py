"""Output schemas for API commands - enforces consistent output structure.

Each command has a Pydantic model defining its output. All fields are always
present (even if empty) so consumers can rely on the structure.
"""

from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema
from .config import ConfigShowOutput, ConfigVersionOutput
from .link import LinkGenerateOutput, LinkOpenOutput
from .repo import RepoResolveOutput

__all__ = [
    "BaseOutputSchema",
    "ConfigShowOutput",
    "ConfigVersionOutput",
    "LinkGenerateOutput",
    "LinkOpenOutput",
    "RepoResolveOutput",
    "get_output_schema",
    "register_output_schema",
]
