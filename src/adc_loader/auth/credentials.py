"""Application default credential file lookup.

This module locates the credential file a client should use when the caller
does not supply credentials explicitly.

Lookup order:
1. File named by the ``GOOGLE_APPLICATION_CREDENTIALS`` environment variable
2. Well-known gcloud file, which is OS dependent:
   - windows: %APPDATA%/gcloud/application_default_credentials.json
   - others: $HOME/gcloud/application_default_credentials.json

Each strategy returns one of three outcomes instead of raising:
- ``Absent``: the mechanism is not configured
- ``Found``: the file exists and its bytes were read
- ``Error``: the override is set but points at a missing file

Example:
    ```python
    from adc_loader.auth import CredentialsLoader

    loader = CredentialsLoader()

    # Only the explicit override
    source = loader.from_env(scope=["scope-a", "scope-b"])

    # Override first, then the well-known file
    source = loader.resolve(scope="scope-a scope-b")

    # Hand the stream to a credential parser, raising on misconfiguration
    credentials = loader.load(ServiceAccountKey.from_stream)
    ```

Security Considerations:
    - Credential bytes are never logged, only paths and byte counts
    - The process environment is read, never modified
    - Thread-safe .env loading with lock
"""

import logging
import os
from collections.abc import Callable, Mapping
from threading import Lock
from typing import BinaryIO, TypeVar

from dotenv import dotenv_values, find_dotenv

from adc_loader.auth.exceptions import CredentialFileError
from adc_loader.auth.filesystem import FileSystem, LocalFileSystem
from adc_loader.auth.sources import Absent, Error, ErrorKind, Found, ResolvedSource, Scope
from adc_loader.platform_detect import well_known_root_env_var

logger = logging.getLogger(__name__)

ENV_VAR = "GOOGLE_APPLICATION_CREDENTIALS"
WELL_KNOWN_PATH = "gcloud/application_default_credentials.json"

ENV_SOURCE = "environment"
WELL_KNOWN_SOURCE = "well-known file"

T = TypeVar("T")


def _unable_to_read_env(cause: str) -> str:
    return f"Unable to read the credential file specified by {ENV_VAR}: {cause}"


class CredentialsLoader:
    """Locate application default credential files.

    The loader holds no credential state: every call re-reads the
    environment and the filesystem. Both are injectable so callers and
    tests can substitute their own.

    Attributes:
        _dotenv_loaded: Whether the .env file has been read.
        _dotenv_lock: Thread lock for safe .env loading.

    Example:
        ```python
        # Live process environment and local disk
        loader = CredentialsLoader()

        # Fake environment, forced Windows lookup
        loader = CredentialsLoader(
            environ={"APPDATA": "C:/Users/me/AppData/Roaming"},
            system_name="Windows",
        )
        ```
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        filesystem: FileSystem | None = None,
        system_name: str | None = None,
        dotenv_path: str | None = None,
        load_dotenv: bool = False,
    ):
        """Initialize the credentials loader.

        Args:
            environ: Environment lookup to use. If None, ``os.environ`` is
                consulted at call time.
            filesystem: Filesystem to check and read. Defaults to the local disk.
            system_name: Operating system identifier for platform detection.
                If None, the running host is inspected.
            dotenv_path: Path to .env file. If None, searches from the current
                working directory upwards.
            load_dotenv: Whether to fall back to .env values for variables
                missing from the process environment. Ignored when
                ``environ`` is given. Default is False.
        """
        self._environ = environ
        self._filesystem = filesystem if filesystem is not None else LocalFileSystem()
        self._system_name = system_name
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv and environ is None
        self._dotenv_values: dict[str, str] = {}
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Read the .env file once (thread-safe)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                path = self._dotenv_path or find_dotenv(usecwd=True)
                if path:
                    values = dotenv_values(dotenv_path=path)
                    self._dotenv_values = {k: v for k, v in values.items() if v is not None}
                    logger.debug(f"Loaded .env file for credential lookup: {path}")
            except Exception as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def _getenv(self, name: str) -> str | None:
        if self._environ is not None:
            return self._environ.get(name)

        value = os.environ.get(name)
        if value is None and self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()
            value = self._dotenv_values.get(name)
        return value

    def _exists(self, path: str) -> bool:
        try:
            return self._filesystem.exists(path)
        except PermissionError as e:
            raise CredentialFileError(f"Permission denied checking credential file: {path}", path=path) from e
        except OSError as e:
            raise CredentialFileError(f"Error checking credential file {path}: {e}", path=path) from e

    def _read(self, path: str, scope: Scope, source: str) -> Found:
        try:
            data = self._filesystem.read_bytes(path)
        except PermissionError as e:
            raise CredentialFileError(f"Permission denied reading credential file: {path}", path=path) from e
        except OSError as e:
            raise CredentialFileError(f"Error reading credential file {path}: {e}", path=path) from e

        logger.debug(f"Resolved credential file from {source}: {path} ({len(data)} bytes)")
        return Found(data=data, scope=scope, path=path, source=source)

    def from_env(self, scope: Scope = None) -> ResolvedSource:
        """Look up the credential file named by GOOGLE_APPLICATION_CREDENTIALS.

        Args:
            scope: Scope of the access request, either a space-delimited string
                or a sequence of strings. Passed through untouched.

        Returns:
            ``Absent`` if the variable is unset or empty, ``Error`` if it names
            a path that does not exist, ``Found`` otherwise.

        Raises:
            CredentialFileError: If the file cannot be checked or read.
        """
        path = self._getenv(ENV_VAR)
        if not path:
            logger.debug(f"{ENV_VAR} not set, skipping explicit credential file")
            return Absent(source=ENV_SOURCE, reason=f"{ENV_VAR} is not set")

        if not self._exists(path):
            message = _unable_to_read_env(f"file {path} does not exist")
            logger.debug(message)
            return Error(kind=ErrorKind.CONFIGURATION, message=message, path=path, env_var_name=ENV_VAR)

        return self._read(path, scope, ENV_SOURCE)

    def well_known_file_path(self) -> str | None:
        """Path of the well-known credential file for this platform.

        Returns:
            The candidate path, or None if the root directory variable
            (APPDATA on Windows, HOME elsewhere) is unset or empty.
        """
        root_env_var = well_known_root_env_var(self._system_name)
        root = self._getenv(root_env_var)
        if not root:
            logger.debug(f"{root_env_var} not set, no well-known credential file location")
            return None
        return os.path.join(root, *WELL_KNOWN_PATH.split("/"))

    def from_well_known_file(self, scope: Scope = None) -> ResolvedSource:
        """Look up the well-known gcloud credential file.

        A missing file is the normal state for most environments and is
        reported as ``Absent``, never as an error.

        Args:
            scope: Scope of the access request. Passed through untouched.

        Returns:
            ``Found`` if the file exists, ``Absent`` otherwise.

        Raises:
            CredentialFileError: If the file cannot be checked or read.
        """
        path = self.well_known_file_path()
        if path is None:
            return Absent(source=WELL_KNOWN_SOURCE, reason="root directory is not set")

        if not self._exists(path):
            logger.debug(f"Well-known credential file not found: {path}")
            return Absent(source=WELL_KNOWN_SOURCE, reason=f"{path} does not exist")

        return self._read(path, scope, WELL_KNOWN_SOURCE)

    def resolve(self, scope: Scope = None) -> ResolvedSource:
        """Look up the explicit override, falling back to the well-known file.

        An ``Error`` from the override is returned as-is; the well-known file
        is only consulted when the override is ``Absent``.
        """
        source = self.from_env(scope)
        if not source.is_absent:
            return source
        return self.from_well_known_file(scope)

    def load(self, factory: Callable[[BinaryIO, Scope], T], scope: Scope = None) -> T | None:
        """Build credentials from the resolved file.

        Args:
            factory: Callable turning the credential stream and scope into a
                credential object.
            scope: Scope of the access request. Passed through untouched.

        Returns:
            The factory's result, or None if no credential file is configured.

        Raises:
            CredentialConfigurationError: If the explicit override is unusable.
            CredentialFileError: If a located file cannot be read.

        Example:
            ```python
            def parse(stream, scope):
                return ServiceAccountKey(json.load(stream), scope)

            credentials = loader.load(parse, scope="scope-a")
            if credentials is None:
                ...  # fall through to other credential strategies
            ```
        """
        source = self.resolve(scope)
        if source.is_error:
            source.raise_error()
        if source.is_absent:
            return None
        return factory(source.stream, source.scope)
