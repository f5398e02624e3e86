"""Tests for host platform detection."""

import pytest

from adc_loader import platform_detect
from adc_loader.platform_detect import is_windows_platform, well_known_root_env_var


class TestIsWindowsPlatform:
    """Test Windows detection from OS identifiers."""

    @pytest.mark.parametrize("system_name", ["Windows_NT", "WIN32", "Windows", "win64"])
    def test_windows_identifiers(self, system_name):
        """Test identifiers starting with WIN in any case."""
        assert is_windows_platform(system_name) is True

    @pytest.mark.parametrize("system_name", ["Darwin", "Linux", "FreeBSD", "CYGWIN_NT-10.0", "Wi"])
    def test_non_windows_identifiers(self, system_name):
        """Test identifiers that do not start with WIN."""
        assert is_windows_platform(system_name) is False

    def test_empty_identifier_is_not_windows(self):
        """Test that an unavailable identifier defaults to non-Windows."""
        assert is_windows_platform("") is False

    def test_defaults_to_running_host(self, monkeypatch):
        """Test that platform.system() is consulted when no identifier is given."""
        monkeypatch.setattr(platform_detect.platform, "system", lambda: "Windows")
        assert is_windows_platform() is True

        monkeypatch.setattr(platform_detect.platform, "system", lambda: "Linux")
        assert is_windows_platform() is False

    def test_undeterminable_host_is_not_windows(self, monkeypatch):
        """Test that platform.system() returning '' is treated as non-Windows."""
        monkeypatch.setattr(platform_detect.platform, "system", lambda: "")
        assert is_windows_platform() is False


class TestWellKnownRootEnvVar:
    """Test root directory variable selection."""

    def test_windows_uses_appdata(self):
        """Test that Windows hosts look under APPDATA, not HOME."""
        assert well_known_root_env_var("Windows_NT") == "APPDATA"

    def test_posix_uses_home(self):
        """Test that POSIX hosts use HOME."""
        assert well_known_root_env_var("Darwin") == "HOME"
        assert well_known_root_env_var("Linux") == "HOME"
