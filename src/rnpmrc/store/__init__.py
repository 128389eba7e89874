"""Profile store package for rnpmrc."""

from rnpmrc.store.profile_store import (
    EditorLaunchError,
    HomeDirectoryUnresolvedError,
    InvalidProfileNameError,
    Profile,
    ProfileError,
    ProfileExistsError,
    ProfileNotFoundError,
    ProfileStore,
    StoreIOError,
    get_store,
)

__all__ = [
    "EditorLaunchError",
    "HomeDirectoryUnresolvedError",
    "InvalidProfileNameError",
    "Profile",
    "ProfileError",
    "ProfileExistsError",
    "ProfileNotFoundError",
    "ProfileStore",
    "StoreIOError",
    "get_store",
]
