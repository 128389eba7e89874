from typing import Annotated

import typer
from rich.markup import escape

from rnpmrc.cli.commands.profile.common import complete_profile_names, console, fail
from rnpmrc.store import ProfileError, get_store

app = typer.Typer()


@app.command("remove")
def remove(
    profile_name: Annotated[
        str,
        typer.Argument(
            metavar="PROFILE",
            help="Name of the profile to remove.",
            autocompletion=complete_profile_names,
        ),
    ],
):
    """Removes a profile. An active link to it is left dangling."""
    try:
        profile = get_store().remove_profile(profile_name)
    except ProfileError as e:
        fail(f'remove profile "{profile_name}"', e)

    console.print(f"[green]Removed profile at: {escape(str(profile.path))}[/green]")
