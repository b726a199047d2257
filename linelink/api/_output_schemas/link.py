"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkGenerateOutput(BaseOutputSchema):
    """Output schema for link generate command."""

    path: str = Field(..., description="Absolute path of the file")
    line: int = Field(..., description="1-based line the link points to")
    link: str = Field(..., description="Generated link, empty string on failure")
    repository: dict[str, Any] = Field(..., description="Resolved repository context, empty dict on failure")
    copied: bool = Field(..., description="Whether the link was copied to the clipboard")


class LinkOpenOutput(BaseOutputSchema):
    """Output schema for link open command.

    Output structure:
    - link: str - the link as given
    - path: str - resolved target path, empty string if the link could not be decoded
    - line: int - 1-based target line, 0 if the link could not be decoded
    - line_index: int - 0-based target line, -1 if the link could not be decoded
    - text: str - content of the target line
    - context_start: int - 1-based line number of the first context line
    - context: list[str] - lines around the target line
    - editor_command: list[str] - editor command that was started, empty if none
    """

    link: str = Field(..., description="Link as given")
    path: str = Field(..., description="Resolved target path")
    line: int = Field(..., description="1-based target line")
    line_index: int = Field(..., description="0-based target line")
    text: str = Field(..., description="Content of the target line")
    context_start: int = Field(..., description="1-based line number of the first context line")
    context: list[str] = Field(..., description="Lines around the target line")
    editor_command: list[str] = Field(..., description="Editor command that was started, empty if none")


register_output_schema("link", "generate", LinkGenerateOutput)
register_output_schema("link", "open", LinkOpenOutput)
