import shlex
import subprocess
from pathlib import Path
from typing import Callable

import structlog

logger = structlog.get_logger(logger_name=__name__)

EditorLauncher = Callable[[str, Path], int]


def launch_editor(editor: str, file_path: Path) -> int:
    """Run `editor file_path` in the foreground and wait for it to exit.

    The editor command is split shell-style, so values such as
    ``"code --wait"`` work. The child inherits stdin/stdout/stderr.

    Returns the editor's exit status. Raises ``OSError`` (usually
    ``FileNotFoundError``) when the editor cannot be spawned or the
    command cannot be parsed.
    """
    try:
        command = shlex.split(editor)
    except ValueError as e:
        raise OSError(f"invalid editor command {editor!r}: {e}") from e
    if not command:
        raise FileNotFoundError("empty editor command")

    logger.debug("Launching editor", command=command, file=str(file_path))
    completed = subprocess.run([*command, str(file_path)])
    logger.debug("Editor exited", returncode=completed.returncode)
    return completed.returncode
