from typing import Annotated

import typer
from rich.markup import escape

from rnpmrc.cli.commands.profile.common import complete_profile_names, console, fail
from rnpmrc.store import ProfileError, get_store

app = typer.Typer()


@app.command("activate")
def activate(
    profile_name: Annotated[
        str,
        typer.Argument(
            metavar="PROFILE",
            help="Name of the profile to activate.",
            autocompletion=complete_profile_names,
        ),
    ],
):
    """Activates a profile by symlinking it to ~/.npmrc."""
    try:
        store = get_store()
        profile = store.activate_profile(profile_name)
    except ProfileError as e:
        fail(f'activate profile "{profile_name}"', e)

    console.print(
        f"[green]Activated profile '{escape(profile.name)}': "
        f"{escape(str(store.link_path))} -> {escape(str(profile.path))}[/green]"
    )
