import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from .errors import ParseError, ReadError, SerializeError, WriteError
from .locks import ReadWriteLock

logger = logging.getLogger(__name__)


class JsonDocumentStore:
    """
    One JSON object persisted in one file.

    ``read`` loads the whole file under a shared lock; ``replace`` overwrites
    the whole file under an exclusive lock. The lock is per instance and
    in-process only, so two processes pointed at the same file can still
    clobber each other.
    """

    def __init__(self, path: Path, *, atomic_writes: bool = False):
        self._path = Path(path)
        self._atomic_writes = atomic_writes
        self._lock = ReadWriteLock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def atomic_writes(self) -> bool:
        return self._atomic_writes

    def initialize(self) -> bool:
        """Create the file with ``{}`` if it does not exist. Returns True if created."""
        if self._path.exists():
            return False
        logger.info("Data file %s not found, creating a new empty one.", self._path)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteError(f"cannot create directory for {self._path}", self._path) from e
        self.replace({})
        return True

    def read(self) -> Dict[str, Any]:
        with self._lock.read_locked():
            try:
                raw = self._path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise ReadError(f"error reading {self._path}", self._path) from e

        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(f"error parsing JSON in {self._path}: {e}", self._path) from e
        except RecursionError as e:
            raise ParseError(f"JSON in {self._path} is nested too deeply", self._path) from e
        if not isinstance(data, dict):
            raise ParseError(
                f"expected a JSON object in {self._path}, got {type(data).__name__}", self._path
            )
        return data

    def replace(self, doc: Dict[str, Any]) -> None:
        """Overwrite the stored document with ``doc``."""
        if not isinstance(doc, dict):
            raise TypeError("document must be a dict")
        try:
            payload = json.dumps(doc, indent=2, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializeError(f"error encoding document: {e}", self._path) from e
        except RecursionError as e:
            raise SerializeError("document is nested too deeply to encode", self._path) from e

        with self._lock.write_locked():
            try:
                if self._atomic_writes:
                    self._write_atomic(payload)
                else:
                    with self._path.open("w", encoding="utf-8") as f:
                        f.write(payload)
            except OSError as e:
                raise WriteError(f"error writing {self._path}", self._path) from e

        logger.info("Successfully saved data to %s", self._path)

    def _write_atomic(self, payload: str) -> None:
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
