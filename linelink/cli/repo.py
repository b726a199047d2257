"""Repo Typer app factory."""

import typer

from linelink.api.repo.cmd_resolve import cmd_resolve
from linelink.cli._handle_stage_result import _handle_stage_result


def repo() -> typer.Typer:
    """Create and configure the repo Typer app."""
    app = typer.Typer(
        name="repo",
        help="Inspect repository context",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="resolve")
    def resolve_cmd(ctx: typer.Context, path: str = typer.Argument(..., help="File to resolve")) -> None:
        """Show the repository or workspace folder a file belongs to."""
        _handle_stage_result(cmd_resolve, ctx)(path=path)

    return app
