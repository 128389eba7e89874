from typing import Annotated

import typer
from rich.markup import escape

from rnpmrc.cli.commands.profile.common import console, fail
from rnpmrc.store import ProfileError, get_store

app = typer.Typer()


@app.command("backup")
def backup(
    profile_name: Annotated[
        str,
        typer.Argument(metavar="PROFILE", help="Name of the profile to create."),
    ],
):
    """Creates a profile from the current ~/.npmrc file."""
    try:
        store = get_store()
        profile = store.backup_profile(profile_name)
    except ProfileError as e:
        fail(f'back up ~/.npmrc to profile "{profile_name}"', e)

    console.print(
        f"[green]Copied {escape(str(store.link_path))} to: "
        f"{escape(str(profile.path))}[/green]"
    )
