"""Output schemas for repo commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RepoResolveOutput(BaseOutputSchema):
    """Output schema for repo resolve command."""

    path: str = Field(..., description="Absolute path of the file")
    kind: str = Field(..., description="'git' or 'workspace', empty string on failure")
    identifier: str = Field(..., description="Origin push URL or workspace folder name")
    relative_path: str = Field(..., description="Path relative to the repository root, forward slashes")


register_output_schema("repo", "resolve", RepoResolveOutput)
