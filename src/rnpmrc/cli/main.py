"""rnpmrc CLI - manage multiple .npmrc files.
Every subcommand performs one profile operation and exits with 0 on success
or 1 on failure, with the error message on stderr.
"""

from importlib.metadata import PackageNotFoundError, version

import typer
from rich.console import Console

from rnpmrc.cli.commands.profile import app as profile_cli
from rnpmrc.logging_setup import initialize_logging

err_console = Console(stderr=True, soft_wrap=True)

app = typer.Typer(
    name="rnpmrc",
    help="A simple tool to manage multiple .npmrc files",
)
app.add_typer(profile_cli)


def _version_callback(value: bool):
    if not value:
        return
    try:
        typer.echo(f"rnpmrc {version('rnpmrc')}")
    except PackageNotFoundError:
        typer.echo("rnpmrc (not installed)")
    raise typer.Exit()


@app.callback(invoke_without_command=True)
def cli_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output with debug logs.",
    ),
    show_version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """A simple tool to manage multiple .npmrc files."""
    initialize_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        err_console.print("[red]Error: no subcommand was used[/red]")
        raise typer.Exit(code=1)


def main() -> None:
    """CLI for the rnpmrc application."""
    try:
        app()
    except SystemExit as e:
        # usage errors exit with 2; every failure here is 1
        if e.code == 2:
            raise SystemExit(1) from None
        raise


if __name__ == "__main__":
    main()
