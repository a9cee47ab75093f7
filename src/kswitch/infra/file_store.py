"""File-per-key implementation of :class:`~kswitch.core.protocols.KeyValueStore`.

Each key is a plain-text file inside the state directory whose content
is the raw value — no encoding, no trailing newline.  Writes truncate
in place; there is no locking and no atomicity across keys.
"""

from __future__ import annotations

import logging
from pathlib import Path

from kswitch.exceptions import StorageError

logger = logging.getLogger(__name__)


class FileKeyValueStore:
    """Concrete :class:`KeyValueStore` backed by a directory of files.

    Usage::

        store = FileKeyValueStore(settings.state_dir)
        store.ensure_directory()
        store.write("previous_context", "dev")
    """

    def __init__(self, directory: Path) -> None:
        self._directory: Path = directory

    @property
    def directory(self) -> Path:
        return self._directory

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def ensure_directory(self) -> None:
        """Create the state directory; an existing directory is fine.

        Raises
        ------
        StorageError
            If the directory cannot be created or the path is a file.
        """
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(
                f"Couldn't create state directory {self._directory}: {exc}",
                hint="Check permissions or set KSWITCH_HOME to a writable path.",
            ) from exc

    def read(self, key: str) -> str:
        path = self._path_for(key)
        try:
            value = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""
        except OSError as exc:
            raise StorageError(f"Couldn't read {path}: {exc}") from exc
        logger.debug("Read %s=%r", key, value)
        return value

    def write(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            path.write_text(value, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Couldn't write {path}: {exc}") from exc
        logger.debug("Wrote %s=%r", key, value)

    def list_keys(self, prefix: str) -> list[str]:
        """Return sorted names of regular files starting with *prefix*."""
        try:
            entries = list(self._directory.iterdir())
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageError(
                f"Couldn't read state directory {self._directory}: {exc}",
            ) from exc
        return sorted(
            entry.name
            for entry in entries
            if entry.name.startswith(prefix) and not entry.is_dir()
        )

    # ------------------------------------------------------------------
    # Key validation
    # ------------------------------------------------------------------

    def _path_for(self, key: str) -> Path:
        """Map *key* to a file directly inside the state directory."""
        if not key or key in (".", "..") or "/" in key or "\\" in key:
            raise StorageError(
                f"Invalid key: {key!r}",
                hint="Favorite names must not contain path separators.",
            )
        return self._directory / key
