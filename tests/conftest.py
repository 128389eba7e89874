"""Shared test fixtures."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from rnpmrc.logging_setup import initialize_logging
from rnpmrc.store import ProfileStore

# Keep log lines out of captured command output
initialize_logging(verbose=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def home_dir(temp_dir):
    """A fake home directory."""
    home = temp_dir / "home"
    home.mkdir()
    return home


@pytest.fixture
def mock_launcher():
    """A fake editor launcher reporting a successful exit."""
    return MagicMock(return_value=0)


@pytest.fixture
def store(home_dir, mock_launcher):
    """A profile store rooted in the fake home directory."""
    return ProfileStore(
        config_dir=home_dir / ".rnpmrc",
        link_path=home_dir / ".npmrc",
        editor_launcher=mock_launcher,
    )
