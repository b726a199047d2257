import typer


def _get_display_format(ctx: typer.Context | None, default: str = "yaml") -> str:
    """Get the display format from the Typer context chain starting at ``ctx``.

    Falls back to ``default`` when there is no context or the flag was never
    set, which is the case when a domain app is invoked on its own.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return default
