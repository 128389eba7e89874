import typer
from rich.markup import escape

from rnpmrc.cli.commands.profile.common import console, fail
from rnpmrc.store import ProfileError, get_store

app = typer.Typer()


@app.command("status")
def status():
    """Shows the currently active profile."""
    try:
        store = get_store()
    except ProfileError as e:
        fail("read the active profile", e)

    profile = store.active_profile()
    if profile is None:
        console.print("No active profile")
        return

    console.print(f"[cyan]{escape(profile.file_name)}[/cyan] is active")
