"""Outcome types returned by the credential lookup strategies."""

import io
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import NoReturn

from adc_loader.auth.exceptions import CredentialConfigurationError

Scope = str | Sequence[str] | None


class ErrorKind(str, Enum):
    """Kinds of configured-but-unusable credential sources."""

    CONFIGURATION = "ConfigurationError"


@dataclass(frozen=True)
class Absent:
    """The lookup mechanism is not configured."""

    source: str
    reason: str = ""

    is_found = False
    is_absent = True
    is_error = False


@dataclass(frozen=True)
class Found:
    """A readable credential file was located.

    ``data`` holds the complete file contents. ``stream`` is a fresh
    in-memory stream over ``data`` for consumers that expect a file-like
    object; it is not part of equality.
    """

    data: bytes
    scope: Scope = field(default=None, hash=False)
    path: str | None = None
    source: str | None = None
    stream: io.BytesIO = field(init=False, repr=False, compare=False)

    is_found = True
    is_absent = False
    is_error = False

    def __post_init__(self):
        object.__setattr__(self, "stream", io.BytesIO(self.data))


@dataclass(frozen=True)
class Error:
    """The lookup mechanism is configured but unusable."""

    kind: ErrorKind
    message: str
    path: str | None = None
    env_var_name: str | None = None

    is_found = False
    is_absent = False
    is_error = True

    def to_exception(self) -> CredentialConfigurationError:
        """Build the exception equivalent of this outcome."""
        return CredentialConfigurationError(self.message, env_var_name=self.env_var_name, path=self.path)

    def raise_error(self) -> NoReturn:
        """Raise the exception equivalent of this outcome."""
        raise self.to_exception()


ResolvedSource = Absent | Found | Error
