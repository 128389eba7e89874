"""
Profile commands for rnpmrc.
Manages .npmrc profile files and which one ~/.npmrc points at.

Commands:
- create: Create a new, empty profile.
- list: List all profile files.
- open: Open a profile in an editor.
- activate: Symlink a profile to ~/.npmrc.
- status: Show the active profile.
- remove: Delete a profile.
- backup: Create a profile from the current ~/.npmrc.
"""

import typer

from .activate import app as activate_app
from .backup import app as backup_app
from .create import app as create_app
from .listing import app as list_app
from .openprofile import app as open_app
from .remove import app as remove_app
from .status import app as status_app

app = typer.Typer(help="Manage .npmrc profiles.")
app.add_typer(create_app)
app.add_typer(list_app)
app.add_typer(open_app)
app.add_typer(activate_app)
app.add_typer(status_app)
app.add_typer(remove_app)
app.add_typer(backup_app)
