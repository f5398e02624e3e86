"""Host platform detection used to pick the well-known credential root."""

import platform

WINDOWS_ROOT_ENV_VAR = "APPDATA"
POSIX_ROOT_ENV_VAR = "HOME"


def is_windows_platform(system_name: str | None = None) -> bool:
    """Return True when running on a Windows-family operating system.

    Args:
        system_name: Operating system identifier to inspect. Defaults to
            ``platform.system()``.

    Returns:
        True if the identifier starts with "WIN" (case-insensitive).
        An empty identifier is treated as non-Windows.
    """
    if system_name is None:
        system_name = platform.system()
    if not system_name:
        return False
    return system_name[:3].upper() == "WIN"


def well_known_root_env_var(system_name: str | None = None) -> str:
    """Name of the environment variable holding the well-known root directory."""
    if is_windows_platform(system_name):
        return WINDOWS_ROOT_ENV_VAR
    return POSIX_ROOT_ENV_VAR
