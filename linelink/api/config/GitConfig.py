from pydantic import BaseModel, ConfigDict, Field


class GitConfig(BaseModel):
    """Git query configuration."""

    model_config = ConfigDict(extra="forbid")

    executable: str = Field("git", min_length=1, description="git executable")
    timeout_secs: float = Field(5.0, gt=0, description="Timeout for each git query")
