"""Local file implementation of the key-value store."""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from picsum_gallery.services.storage import KeyValueStore


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Stores each key as a JSON file inside a directory."""

    root: Path

    def get(self, key: str) -> bytes | None:
        """Return the file contents for key, if the file exists."""
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        """Atomically replace the file for key."""
        self.root.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(value)
            os.replace(tmp_name, self._path(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _path(self, key: str) -> Path:
        return self.root / f"{key}.json"
