"""Create the main Typer CLI app."""

import typer

from linelink.api.config.LinelinkConfig import LinelinkConfig
from linelink.cli.config import config
from linelink.cli.link import link
from linelink.cli.repo import repo
from linelink.utils.configure_logging import configure_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="linelink - shareable links to exact lines of files",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    # Register all domain apps (call factory functions)
    app.add_typer(link(), name="link")
    app.add_typer(repo(), name="repo")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        try:
            level = LinelinkConfig.load().log.level
        except ValueError:
            # Commands report the invalid config themselves
            level = "INFO"
        configure_logging(LinelinkConfig.get_home_dir(), level)

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
