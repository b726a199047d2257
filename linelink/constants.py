"""Shared constants for linelink locations and link format."""

LINELINK_HOME_EXT = ".linelink"  # user-level state/config directory suffix

DEFAULT_SCHEME = "vscode"  # application that consumes the generated links

ORIGIN_REMOTE = "origin"  # the only remote used as a repository identifier
