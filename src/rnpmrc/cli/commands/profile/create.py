from typing import Annotated

import typer
from rich.markup import escape

from rnpmrc.cli.commands.profile.common import console, fail
from rnpmrc.store import ProfileError, get_store

app = typer.Typer()


@app.command("create")
def create(
    profile_name: Annotated[
        str,
        typer.Argument(metavar="PROFILE", help="Name of the profile to create."),
    ],
):
    """Creates a new, empty profile."""
    try:
        profile = get_store().create_profile(profile_name)
    except ProfileError as e:
        fail(f'create profile "{profile_name}"', e)

    console.print(f"[green]Created profile at: {escape(str(profile.path))}[/green]")
