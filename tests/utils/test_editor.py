"""Tests for the external editor launcher."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from rnpmrc.utils.editor import launch_editor


class TestLaunchEditor:
    """Tests for launch_editor."""

    def test_runs_editor_with_file_argument(self):
        with patch("rnpmrc.utils.editor.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0)

            returncode = launch_editor("vi", Path("/tmp/.npmrc.work"))

        assert returncode == 0
        mock_run.assert_called_once_with(["vi", "/tmp/.npmrc.work"])

    def test_splits_editor_arguments(self):
        with patch("rnpmrc.utils.editor.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0)

            launch_editor("code --wait", Path("/tmp/.npmrc.work"))

        mock_run.assert_called_once_with(["code", "--wait", "/tmp/.npmrc.work"])

    def test_returns_editor_exit_status(self):
        with patch("rnpmrc.utils.editor.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=2)

            assert launch_editor("vi", Path("/tmp/x")) == 2

    def test_missing_editor_raises(self):
        with pytest.raises(FileNotFoundError):
            launch_editor("rnpmrc-no-such-editor-binary", Path("/tmp/x"))

    def test_empty_editor_raises(self):
        with pytest.raises(FileNotFoundError):
            launch_editor("  ", Path("/tmp/x"))

    def test_unbalanced_quote_raises_oserror(self):
        with patch("rnpmrc.utils.editor.subprocess.run") as mock_run:
            with pytest.raises(OSError, match="invalid editor command"):
                launch_editor("vi '", Path("/tmp/x"))

        mock_run.assert_not_called()
