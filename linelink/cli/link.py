"""Link Typer app factory."""

import typer

from linelink.api.link.cmd_generate import cmd_generate
from linelink.api.link.cmd_open import cmd_open
from linelink.cli._handle_stage_result import _handle_stage_result
from linelink.cli.display.CLIDisplay import CLIDisplay


def _print_line_view(output: dict, display_format: str) -> None:
    """Show the focused line with its context, then the structured output."""
    display = CLIDisplay()
    if output.get("context"):
        display.line_view(output["path"], output["context_start"], output["context"], output["line"])
    display.json_output(output, format=display_format)


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Generate and open links to lines of files",
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

    @app.command(name="generate")
    def generate_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="File to link to"),
        line: int = typer.Argument(..., min=1, help="1-based line number"),
        copy: bool = typer.Option(False, "--copy", "-c", help="Copy the link to the clipboard"),
        portable: bool | None = typer.Option(
            None,
            "--portable/--absolute",
            help="Embed repository identifier and relative path (default from config)",
        ),
    ) -> None:
        """Generate a link to a line of a file."""
        _handle_stage_result(cmd_generate, ctx)(path=path, line=line, copy=copy, portable=portable)

    @app.command(name="open")
    def open_cmd(
        ctx: typer.Context,
        link: str | None = typer.Argument(None, help="Link to open (prompted for when omitted)"),
        launch: bool = typer.Option(False, "--launch", "-l", help="Also start the editor at the line"),
    ) -> None:
        """Open a link and show the line it points to."""
        if link is None:
            link = typer.prompt("Paste the line link", default="", show_default=False)
        if not link.strip():
            typer.echo("No link provided", err=True)
            raise typer.Exit()
        _handle_stage_result(cmd_open, ctx, result_printer=_print_line_view)(link=link, launch=launch)

    return app
