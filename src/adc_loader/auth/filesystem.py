"""Filesystem access used by the credential lookup strategies.

The loader only ever needs two operations: an existence check and a full
read. Anything providing them can be injected in place of the local disk.
"""

from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Read-only filesystem capability."""

    def exists(self, path: str) -> bool: ...

    def read_bytes(self, path: str) -> bytes: ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as fh:
            return fh.read()
