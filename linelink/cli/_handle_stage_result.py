"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._get_display_format import _get_display_format
from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _handle_stage_result(
    func: F,
    ctx: typer.Context | None = None,
    result_printer: Callable[[dict, str], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as JSON or YAML)

    Args:
        func: Function that returns StageResult
        ctx: Context of the invoked command; the display format is read from its chain
        result_printer: Replaces the default stdout printer for stage 4, called
            with the output dict and the display format

    Returns:
        Wrapped function that handles display and exits with appropriate code
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        _run_single_execution(func, args, kwargs, display, _get_display_format(ctx), result_printer)

    return wrapper  # type: ignore[return-value]
