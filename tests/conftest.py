"""
Pytest configuration and shared fixtures for field checker tests.

This module provides the validators, fake filesystems and temporary files
shared across the test modules.
"""

from pathlib import Path
from typing import Dict, Optional

import pytest

from field_checker.core.validator import Validator
from field_checker.utils.error_handler import FileAccessError

# ============================================================================
# Pytest Configuration
# ============================================================================

ENV_OVERRIDES = (
    "FIELD_CHECKER_DATE_FORMAT",
    "FIELD_CHECKER_TIME_FORMAT",
    "FIELD_CHECKER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings overrides from the host environment out of the tests."""
    for var in ENV_OVERRIDES:
        monkeypatch.delenv(var, raising=False)


# ============================================================================
# Filesystem Fixtures
# ============================================================================


class FakeFileSystem:
    """In-memory FileSystem: known paths map to sizes, everything else is missing."""

    def __init__(self, sizes: Optional[Dict[str, int]] = None, denied=()):
        self.sizes = dict(sizes or {})
        self.denied = set(denied)
        self.calls = []

    def file_size(self, path: str) -> Optional[int]:
        self.calls.append(path)
        if path in self.denied:
            raise FileAccessError(f"Cannot stat '{path}': Permission denied", path)
        return self.sizes.get(path)


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """Fake filesystem with a couple of files and one unreadable path."""
    return FakeFileSystem(
        sizes={"/data/report.pdf": 2048, "/data/empty.txt": 0},
        denied={"/secret/keys.pem"},
    )


@pytest.fixture
def validator(fake_fs: FakeFileSystem) -> Validator:
    """Validator wired to the fake filesystem."""
    return Validator(filesystem=fake_fs)


@pytest.fixture
def local_validator() -> Validator:
    """Validator using the real filesystem."""
    return Validator()


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def sized_file(tmp_path: Path) -> Path:
    """A 100-byte file on disk."""
    path = tmp_path / "upload.bin"
    path.write_bytes(b"x" * 100)
    return path


@pytest.fixture
def unreadable_dir(tmp_path: Path):
    """A directory whose entries cannot be stat'ed by a non-root user."""
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "inner.txt").write_text("hidden")
    locked.chmod(0)
    try:
        yield locked
    finally:
        locked.chmod(0o755)


