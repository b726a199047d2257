def normalize_relative_path(relative_path: str) -> str:
    """Use forward slashes and drop any leading ``./`` segments."""
    normalized = relative_path.replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized
