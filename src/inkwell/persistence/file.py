"""File-backed persistence.

Writes the rendered payload to a single file, replacing whatever was there.

Example:
    >>> strategy = FileStrategy("out/notes.txt")
    >>> strategy.save("Hello\\tWorld\\n").ok
    True
"""

from __future__ import annotations

import locale
import os
from pathlib import Path

from inkwell.errors import StorageIOError
from inkwell.persistence.result import SaveResult
from inkwell.utils.logger import get_logger

logger = get_logger(__name__)


class FileStrategy:
    """Persist the payload to a file path with overwrite semantics.

    The encoding defaults to the platform default, matching ``open()``.
    """

    __slots__ = ("_encoding", "_path")

    def __init__(self, path: str | os.PathLike[str], *, encoding: str | None = None) -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def save(self, data: str) -> SaveResult:
        """Write ``data`` to the configured path, overwriting prior content.

        The payload is encoded before the file is opened, so an encoding
        failure leaves the previous content in place.
        """
        destination = str(self._path)
        encoding = self._encoding or locale.getpreferredencoding(False)
        try:
            payload = data.encode(encoding)
            self._path.write_bytes(payload)
        except (OSError, UnicodeError, LookupError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            error = StorageIOError(reason, destination=destination)
            error.__cause__ = e
            logger.debug("File write to %s failed: %s", destination, e)
            return SaveResult.failure(error)
        return SaveResult.success(destination, len(data))

    def load(self) -> str | None:
        """Return the last saved payload, or None if nothing was saved yet."""
        try:
            return self._path.read_text(encoding=self._encoding)
        except FileNotFoundError:
            return None

    def __repr__(self) -> str:
        return f"FileStrategy({str(self._path)!r})"
