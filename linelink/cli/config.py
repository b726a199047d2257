"""Config Typer app factory."""

import typer

from linelink.api.config.cmd_show import cmd_show
from linelink.api.config.cmd_version import cmd_version
from linelink.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
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

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        section: str | None = typer.Argument(None, help="Section name (link, workspace, git, log); omit to list"),
    ) -> None:
        """Show configuration sections or a specific section."""
        _handle_stage_result(cmd_show, ctx)(section=section or "")

    @app.command(name="version")
    def version_cmd(ctx: typer.Context) -> None:
        """Show linelink version information."""
        _handle_stage_result(cmd_version, ctx)()

    return app
