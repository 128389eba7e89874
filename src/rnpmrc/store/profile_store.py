"""Profile store for rnpmrc.

Plain-filesystem bookkeeping for .npmrc profiles:
- Profile files live in the config root as `.npmrc.<name>`
- The active profile is whatever `~/.npmrc` symlinks to
- No other state is persisted
"""

import os
import shutil
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict

from rnpmrc.config import Config, cfg
from rnpmrc.utils.editor import EditorLauncher, launch_editor

logger = structlog.get_logger(logger_name=__name__)


# =============================================================================
# Errors
# =============================================================================


class ProfileError(Exception):
    """Base class for every error reported by the profile store."""


class ProfileNotFoundError(ProfileError):
    """The referenced profile file does not exist."""


class ProfileExistsError(ProfileError):
    """The profile to create already exists."""


class InvalidProfileNameError(ProfileError):
    """The profile name is empty or contains a path separator."""


class StoreIOError(ProfileError):
    """A filesystem operation on the config root or the active link failed."""


class EditorLaunchError(StoreIOError):
    """The external editor could not be started."""


class HomeDirectoryUnresolvedError(ProfileError):
    """The user's home directory cannot be determined."""


# =============================================================================
# Models
# =============================================================================


class Profile(BaseModel):
    """A named .npmrc variant stored in the config root."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: Path

    @property
    def file_name(self) -> str:
        return self.path.name

    def __str__(self) -> str:
        return self.name


# =============================================================================
# Profile Store
# =============================================================================


class ProfileStore:
    """Manager for profile files and the active link."""

    def __init__(
        self,
        config_dir: Path,
        link_path: Path,
        profile_prefix: str = ".npmrc.",
        default_editor: str = "vi",
        editor_launcher: EditorLauncher = launch_editor,
    ):
        self.config_dir = Path(os.path.abspath(config_dir))
        self.link_path = Path(os.path.abspath(link_path))
        self.profile_prefix = profile_prefix
        self.default_editor = default_editor
        self.editor_launcher = editor_launcher
        self._ensure_config_dir()

    @classmethod
    def from_config(cls, config: Config, **kwargs) -> "ProfileStore":
        """Build a store from application settings."""
        home_dir = resolve_home_dir(config)
        return cls(
            config_dir=home_dir / config.config_dir_name,
            link_path=home_dir / config.link_name,
            profile_prefix=config.profile_prefix,
            default_editor=config.default_editor,
            **kwargs,
        )

    def _ensure_config_dir(self):
        """Create the config root (and parents) if it is not a directory yet."""
        if self.config_dir.is_dir():
            return
        logger.info("Creating config directory", path=str(self.config_dir))
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreIOError(
                f"failed to create config dir {self.config_dir}: {e}"
            ) from e

    # =========================================================================
    # Path helpers
    # =========================================================================

    def profile_path(self, name: str) -> Path:
        """Path of the file backing profile `name`."""
        _validate_name(name)
        return self.config_dir / f"{self.profile_prefix}{name}"

    def _profile_from_path(self, path: Path) -> Profile:
        name = path.name
        if name.startswith(self.profile_prefix):
            name = name[len(self.profile_prefix) :]
        return Profile(name=name, path=path)

    def _require_profile(self, name: str) -> Path:
        file_path = self.profile_path(name)
        # os.path.isfile reports False for names the OS rejects (ENAMETOOLONG)
        if not os.path.isfile(file_path):
            raise ProfileNotFoundError(f"file {file_path} doesn't exist")
        return file_path

    # =========================================================================
    # Profile Operations
    # =========================================================================

    def create_profile(self, name: str) -> Profile:
        """Create a new, empty profile."""
        file_path = self.profile_path(name)
        if os.path.lexists(file_path):
            raise ProfileExistsError(f"file {file_path} already exists")

        logger.info("Creating profile", profile=name, path=str(file_path))
        try:
            # "x" refuses to clobber a file created since the check above
            with file_path.open("x"):
                pass
        except FileExistsError as e:
            raise ProfileExistsError(f"file {file_path} already exists") from e
        except OSError as e:
            raise StoreIOError(f"failed to create {file_path}: {e}") from e
        return Profile(name=name, path=file_path)

    def list_profiles(self) -> list[Profile]:
        """List profiles in the config root, sorted by file name."""
        try:
            entries = list(self.config_dir.iterdir())
        except OSError as e:
            raise StoreIOError(f"failed to read {self.config_dir}: {e}") from e

        profiles = [
            self._profile_from_path(entry)
            for entry in entries
            if entry.is_file() and self.profile_prefix in entry.name
        ]
        profiles.sort(key=lambda p: p.file_name)
        logger.debug("Listed profiles", count=len(profiles))
        return profiles

    def get_profile_names(self) -> list[str]:
        """Names usable with `profile_path`, or an empty list if unreadable."""
        try:
            profiles = self.list_profiles()
        except StoreIOError:
            return []
        return [
            p.name for p in profiles if p.file_name.startswith(self.profile_prefix)
        ]

    def open_profile(self, name: str, editor: str | None = None) -> int:
        """Open a profile in an external editor and wait for it to exit.

        Returns the editor's exit status. A non-zero status is not an error;
        only failing to start the editor is.
        """
        file_path = self._require_profile(name)
        editor = editor or self.default_editor

        logger.info("Opening profile", profile=name, editor=editor)
        try:
            returncode = self.editor_launcher(editor, file_path)
        except OSError as e:
            raise EditorLaunchError(f"failed to run editor {editor!r}: {e}") from e

        if returncode:
            logger.warning("Editor exited with non-zero status", returncode=returncode)
        return returncode

    def remove_profile(self, name: str) -> Profile:
        """Delete a profile file. An active link pointing at it is left dangling."""
        file_path = self._require_profile(name)

        logger.info("Removing profile", profile=name, path=str(file_path))
        try:
            file_path.unlink()
        except OSError as e:
            raise StoreIOError(f"failed to remove {file_path}: {e}") from e
        return Profile(name=name, path=file_path)

    def backup_profile(self, name: str) -> Profile:
        """Create a new profile from the current content of the link path."""
        file_path = self.profile_path(name)
        if os.path.lexists(file_path):
            raise ProfileExistsError(f"file {file_path} already exists")
        if not self.link_path.is_file():
            raise ProfileNotFoundError(f"file {self.link_path} doesn't exist")

        logger.info(
            "Backing up current file",
            source=str(self.link_path),
            profile=name,
        )
        try:
            shutil.copyfile(self.link_path, file_path)
        except OSError as e:
            raise StoreIOError(
                f"failed to copy {self.link_path} to {file_path}: {e}"
            ) from e
        return Profile(name=name, path=file_path)

    # =========================================================================
    # Activation
    # =========================================================================

    def activate_profile(self, name: str) -> Profile:
        """Point the link path at profile `name`, replacing whatever is there.

        If removing the old entry succeeds but creating the link fails, no
        active link is left behind.
        """
        file_path = self._require_profile(name)

        if os.path.lexists(self.link_path):
            self._remove_link_path()

        logger.info(
            "Creating symlink", link=str(self.link_path), target=str(file_path)
        )
        try:
            self.link_path.symlink_to(file_path)
        except OSError as e:
            raise StoreIOError(
                f"failed to link {self.link_path} to {file_path}: {e}"
            ) from e
        return Profile(name=name, path=file_path)

    def _remove_link_path(self):
        link_path = self.link_path
        try:
            if link_path.is_symlink():
                logger.debug("Removing previous link", path=str(link_path))
                link_path.unlink()
            elif link_path.is_dir():
                # rmdir only: a populated directory is not ours to delete
                logger.warning("Removing directory", path=str(link_path))
                link_path.rmdir()
            else:
                logger.warning("Replacing regular file", path=str(link_path))
                link_path.unlink()
        except OSError as e:
            raise StoreIOError(f"failed to remove {link_path}: {e}") from e

    def active_profile(self) -> Profile | None:
        """Return the profile the link points at, or None.

        Never raises: an unreadable link, a dangling link or a link to a file
        outside the config root all mean there is no active profile.
        """
        try:
            target = Path(os.readlink(self.link_path))
        except OSError:
            return None

        if not target.is_absolute():
            target = self.link_path.parent / target
        target = Path(os.path.normpath(target))

        if not os.path.isfile(target) or target.parent != self.config_dir:
            return None
        return self._profile_from_path(target)


# =============================================================================
# Helpers
# =============================================================================


def _validate_name(name: str):
    if not name or not name.strip():
        raise InvalidProfileNameError("profile name must not be empty")
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    if any(sep in name for sep in separators) or name in (".", ".."):
        raise InvalidProfileNameError(
            f"profile name {name!r} must not contain a path separator"
        )


def resolve_home_dir(config: Config) -> Path:
    """Return the configured home directory, falling back to the user's home."""
    if config.home_dir is not None:
        return config.home_dir
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryUnresolvedError("did not find home directory") from e


# =============================================================================
# Global store instance
# =============================================================================

_store: ProfileStore | None = None


def get_store() -> ProfileStore:
    """Get the global profile store, creating the config root on first use."""
    global _store
    if _store is None:
        _store = ProfileStore.from_config(cfg)
    return _store
