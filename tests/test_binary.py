"""Tests for BinaryProvider discovery order."""

from unittest.mock import patch

import pytest

from oxlint_x.core.binary import BinaryNotFoundError, BinaryProvider


@pytest.fixture
def local_binary(tmp_path):
    bin_dir = tmp_path / "node_modules" / ".bin"
    bin_dir.mkdir(parents=True)
    binary = bin_dir / "oxlint"
    binary.write_text("#!/bin/sh\n")
    return binary


class TestDetection:
    """Explicit path, then node_modules/.bin, then PATH."""

    def test_explicit_path(self, tmp_path, local_binary):
        explicit = tmp_path / "custom-oxlint"
        explicit.write_text("")

        provider = BinaryProvider(str(explicit), tmp_path)

        assert provider.binary_path == str(explicit)

    def test_missing_explicit_path_raises(self, tmp_path, local_binary):
        provider = BinaryProvider(str(tmp_path / "nope"), tmp_path)

        with pytest.raises(BinaryNotFoundError, match="does not exist"):
            provider.binary_path

    @patch("oxlint_x.core.binary.sys.platform", "linux")
    @patch("oxlint_x.core.binary.shutil.which", return_value="/usr/bin/oxlint")
    def test_local_install_preferred_over_path(self, mock_which, tmp_path, local_binary):
        provider = BinaryProvider(search_root=tmp_path)

        assert provider.binary_path == str(local_binary)
        mock_which.assert_not_called()

    @patch("oxlint_x.core.binary.sys.platform", "win32")
    @patch("oxlint_x.core.binary.shutil.which", return_value=None)
    def test_windows_cmd_shim(self, mock_which, tmp_path):
        bin_dir = tmp_path / "node_modules" / ".bin"
        bin_dir.mkdir(parents=True)
        (bin_dir / "oxlint.cmd").write_text("")

        provider = BinaryProvider(search_root=tmp_path)

        assert provider.binary_path == str(bin_dir / "oxlint.cmd")

    @patch("oxlint_x.core.binary.shutil.which", return_value="/usr/local/bin/oxlint")
    def test_falls_back_to_path(self, mock_which, tmp_path):
        provider = BinaryProvider(search_root=tmp_path)

        assert provider.binary_path == "/usr/local/bin/oxlint"
        mock_which.assert_called_once_with("oxlint")

    @patch("oxlint_x.core.binary.shutil.which", return_value=None)
    def test_not_found(self, mock_which, tmp_path):
        provider = BinaryProvider(search_root=tmp_path)

        with pytest.raises(BinaryNotFoundError, match="npm install"):
            provider.binary_path


class TestCaching:
    """Detection runs once per provider."""

    @patch("oxlint_x.core.binary.shutil.which", return_value="/usr/bin/oxlint")
    def test_detected_once(self, mock_which, tmp_path):
        provider = BinaryProvider(search_root=tmp_path)

        provider.binary_path
        provider.binary_path

        assert mock_which.call_count == 1

    @patch("oxlint_x.core.binary.shutil.which", return_value="/usr/bin/oxlint")
    def test_build_exec_args(self, mock_which, tmp_path):
        provider = BinaryProvider(search_root=tmp_path)

        assert provider.build_exec_args(["--fix", "a.js"]) == ["/usr/bin/oxlint", "--fix", "a.js"]
