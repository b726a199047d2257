"""Top-level linelink configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from ...constants import LINELINK_HOME_EXT
from .GitConfig import GitConfig
from .LinkConfig import LinkConfig
from .LogConfig import LogConfig
from .WorkspaceConfig import WorkspaceConfig


class LinelinkConfig(BaseModel):
    """Top-level configuration for linelink."""

    model_config = ConfigDict(extra="forbid")

    link: LinkConfig = Field(default_factory=LinkConfig)
    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
    git: GitConfig = Field(default_factory=GitConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @computed_field
    def path(self) -> Path:
        """Path to config file."""
        return self.get_config_path()

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get linelink home directory from LINELINK_HOME, defaulting to ~/.linelink."""
        home_env = os.environ.get("LINELINK_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / LINELINK_HOME_EXT

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to the config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "LinelinkConfig":
        """Load and validate config from file.

        A missing file yields the defaults for every section.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary keyed by section."""
        return {
            "link": self.link.model_dump(),
            "workspace": self.workspace.model_dump(),
            "git": self.git.model_dump(),
            "log": self.log.model_dump(),
        }
