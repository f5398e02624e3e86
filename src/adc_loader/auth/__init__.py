"""Application default credential lookup.

This module provides:
- Explicit override lookup (GOOGLE_APPLICATION_CREDENTIALS)
- OS-aware well-known file lookup (APPDATA / HOME)
- Tagged outcomes (Absent, Found, Error) instead of exceptions

Example:
    ```python
    from adc_loader.auth import CredentialsLoader

    loader = CredentialsLoader()
    source = loader.resolve()
    if source.is_found:
        print(f"Using credentials from {source.path}")
    ```
"""

from adc_loader.auth.credentials import ENV_VAR, WELL_KNOWN_PATH, CredentialsLoader
from adc_loader.auth.exceptions import (
    CredentialConfigurationError,
    CredentialError,
    CredentialFileError,
)
from adc_loader.auth.filesystem import FileSystem, LocalFileSystem
from adc_loader.auth.sources import Absent, Error, ErrorKind, Found, ResolvedSource, Scope

__all__ = [
    "ENV_VAR",
    "WELL_KNOWN_PATH",
    "Absent",
    "CredentialConfigurationError",
    "CredentialError",
    "CredentialFileError",
    "CredentialsLoader",
    "Error",
    "ErrorKind",
    "FileSystem",
    "Found",
    "LocalFileSystem",
    "ResolvedSource",
    "Scope",
]
