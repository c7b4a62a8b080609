"""
File Validators

``file_type`` only parses the path it is given. ``file_size`` asks a
FileSystem for the size of the file at that path; the default LocalFileSystem
stats the real filesystem, and tests substitute their own.
"""

import errno
import os
import stat
from pathlib import Path, PurePath
from typing import Any, Optional, Protocol

from ..config.options import CheckOptions
from ..utils.error_handler import FileAccessError
from .base import Kind, Outcome, Rule, as_text

# stat() failures that mean "there is no such file" rather than "access denied"
MISSING_ERRNOS = frozenset(
    {errno.ENOENT, errno.ENOTDIR, errno.ENAMETOOLONG, errno.ELOOP}
)


class FileSystem(Protocol):
    """The one filesystem question the validator asks"""

    def file_size(self, path: str) -> Optional[int]:
        """
        Size in bytes of the regular file at ``path``.

        Returns:
            The size, or None when no regular file exists there

        Raises:
            FileAccessError: If the lookup is refused (e.g. permissions)
        """
        ...


class LocalFileSystem:
    """FileSystem backed by ``os.stat``"""

    def file_size(self, path: str) -> Optional[int]:
        try:
            info = Path(path).stat()
        except ValueError:
            # Paths with embedded NUL bytes cannot name a file
            return None
        except OSError as e:
            if e.errno in MISSING_ERRNOS:
                return None
            raise FileAccessError(f"Cannot stat '{path}': {e.strerror}", path) from e

        if not stat.S_ISREG(info.st_mode):
            return None
        return info.st_size


def path_text(value: Any) -> Optional[str]:
    """Text form of a path-like or scalar value"""
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    return as_text(value)


def extension_of(path: str) -> str:
    """
    Extension of the last path component, without the dot and with case kept.

    ``"photo.JPG"`` gives ``"JPG"``, ``"archive.tar.gz"`` gives ``"gz"``,
    ``".bashrc"`` gives ``"bashrc"`` and ``"README"`` gives ``""``.
    """
    name = PurePath(path).name
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


class FileTypeRule(Rule):
    """Path whose extension appears in ``allowed_types``"""

    kind = Kind.FILE_TYPE

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        text = path_text(value)
        if text is None:
            return

        extension = extension_of(text)
        if extension in options.allowed_types:
            outcome.valid = True
            outcome.file_extension = extension


class FileSizeRule(Rule):
    """Existing regular file no larger than ``max_size`` bytes"""

    kind = Kind.FILE_SIZE

    def __init__(self, filesystem: FileSystem):
        super().__init__()
        self.filesystem = filesystem

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        text = path_text(value)
        if not text:
            return

        size = self.filesystem.file_size(text)
        if size is None:
            self.logger.debug(f"No regular file at '{text}'")
            return

        if options.max_size is None or size <= options.max_size:
            outcome.valid = True
            outcome.file_size = size
