def describe_error(exc: Exception) -> str:
    """Format an exception as ``"<ErrorName>: <cause>"`` for command output."""
    return f"{type(exc).__name__}: {exc}"
