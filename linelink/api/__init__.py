"""API module for linelink commands.

Each ``cmd_*`` function returns a StageResult and is the single source of truth
for the matching CLI command.
"""

__all__ = []
