"""Workspace folder configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class WorkspaceFolder(BaseModel):
    """A named root directory used when a file has no git context."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Display name, used as the repository identifier")
    root: str = Field(..., min_length=1, description="Root directory of the folder (~ is expanded)")

    @property
    def path(self) -> Path:
        return Path(self.root).expanduser()
