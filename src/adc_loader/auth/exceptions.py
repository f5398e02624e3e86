"""Custom exceptions for application default credential lookup.

The lookup strategies report a missing override file as an ``Error``
outcome rather than raising. These exceptions are used when a caller asks
for that outcome to be raised, and for read failures on files that do exist.

Example:
    ```python
    from adc_loader.auth.exceptions import CredentialConfigurationError

    source = loader.from_env()
    if source.is_error:
        raise source.to_exception()
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialConfigurationError(CredentialError):
    """Raised when an explicit credential override is unusable.

    This is the exception form of an ``Error`` outcome: the environment
    variable is set but points at a file that does not exist.

    Attributes:
        env_var_name: The environment variable holding the override (if any).
        path: The offending path (if any).

    Example:
        ```python
        try:
            credentials = loader.load(ServiceAccountKey.from_stream)
        except CredentialConfigurationError as e:
            print(f"Fix {e.env_var_name}: {e.path} is missing")
        ```
    """

    def __init__(self, message: str, env_var_name: str | None = None, path: str | None = None):
        """Initialize CredentialConfigurationError.

        Args:
            message: Human-readable description naming the offending path.
            env_var_name: Optional environment variable name for reference.
            path: Optional path that could not be used.
        """
        super().__init__(message)
        self.env_var_name = env_var_name
        self.path = path


class CredentialFileError(CredentialError):
    """Raised when an existing credential file cannot be read.

    Permission errors, directories in place of files and other I/O failures
    end up here. They are unexpected and are never reported as outcomes.

    Example:
        ```python
        try:
            source = loader.from_well_known_file()
        except CredentialFileError as e:
            print(f"Cannot read credential file {e.path}: {e}")
        ```
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
