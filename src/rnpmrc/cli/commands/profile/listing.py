import typer

from rnpmrc.cli.commands.profile.common import fail
from rnpmrc.store import ProfileError, get_store

app = typer.Typer()


@app.command("list")
def list_profiles():
    """Lists all profiles, one file name per line."""
    try:
        profiles = get_store().list_profiles()
    except ProfileError as e:
        fail("list all profiles", e)

    for profile in profiles:
        typer.echo(profile.file_name)
