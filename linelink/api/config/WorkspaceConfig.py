from pydantic import BaseModel, ConfigDict, Field

from .WorkspaceFolder import WorkspaceFolder


class WorkspaceConfig(BaseModel):
    """Workspace folders, in priority order."""

    model_config = ConfigDict(extra="forbid")

    folders: list[WorkspaceFolder] = Field(default_factory=list, description="Fallback roots for files outside git")
