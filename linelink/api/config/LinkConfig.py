"""Link generation and opening configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_SCHEME


class LinkConfig(BaseModel):
    """How links are written and where they are opened."""

    model_config = ConfigDict(extra="forbid")

    scheme: str = Field(
        DEFAULT_SCHEME,
        pattern=r"^[A-Za-z][A-Za-z0-9+.-]*$",
        description="Scheme of the application consuming links",
    )
    portable: bool = Field(False, description="Embed repository identifier and relative path in generated links")
    checkouts: dict[str, str] = Field(
        default_factory=dict,
        description="Repository identifier -> local checkout root, used to open portable links",
    )
    editor_command: list[str] = Field(
        default_factory=list,
        description="Editor command template with {path} and {line} placeholders; empty uses $VISUAL/$EDITOR",
    )
    context_lines: int = Field(3, ge=0, description="Lines shown around the focused line when opening")
