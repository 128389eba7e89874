from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from rnpmrc.logging_setup import initialize_logging
from rnpmrc.store import ProfileError, get_store

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def complete_profile_names(incomplete: str) -> list[str]:
    # completion runs without the app callback; stdout must hold only names
    initialize_logging()
    try:
        names = get_store().get_profile_names()
    except ProfileError:
        return []
    return [name for name in names if name.startswith(incomplete)]


def fail(action: str, error: ProfileError) -> NoReturn:
    """Report a failed command on stderr and exit with status 1."""
    err_console.print(f"[red]Failed to {escape(action)}: {escape(str(error))}[/red]")
    raise typer.Exit(code=1)
