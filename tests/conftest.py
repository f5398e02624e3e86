"""Pytest configuration and shared fixtures for adc-loader tests."""

import pytest


class FakeFileSystem:
    """In-memory FileSystem for tests that should not touch the disk."""

    def __init__(self, files=None):
        self.files = dict(files or {})
        self.exists_errors = {}
        self.reads = []

    def exists(self, path):
        if path in self.exists_errors:
            raise self.exists_errors[path]
        return path in self.files

    def read_bytes(self, path):
        self.reads.append(path)
        content = self.files[path]
        if isinstance(content, Exception):
            raise content
        return content


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear credential-related environment variables before each test.

    This prevents a developer's real gcloud setup from leaking into tests.
    """
    import os

    test_prefixes = ("TEST_", "GOOGLE_APPLICATION_", "CLOUDSDK_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def fake_fs():
    """Empty in-memory filesystem; add files via ``fake_fs.files[path] = b"..."``."""
    return FakeFileSystem()
