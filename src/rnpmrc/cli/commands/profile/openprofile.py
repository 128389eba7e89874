from typing import Annotated, Optional

import typer

from rnpmrc.cli.commands.profile.common import complete_profile_names, fail
from rnpmrc.store import ProfileError, get_store

app = typer.Typer()


@app.command("open")
def open_profile(
    profile_name: Annotated[
        str,
        typer.Argument(
            metavar="PROFILE",
            help="Name of the profile to open.",
            autocompletion=complete_profile_names,
        ),
    ],
    editor: Annotated[
        Optional[str],
        typer.Option(
            "--editor",
            "-e",
            metavar="EDITOR",
            help="Editor to open the file with, defaults to vi or RNPMRC_DEFAULT_EDITOR.",
        ),
    ] = None,
):
    """Opens a profile in an editor and waits for it to close."""
    try:
        get_store().open_profile(profile_name, editor=editor)
    except ProfileError as e:
        fail(f'open profile "{profile_name}"', e)
