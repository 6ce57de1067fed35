"""Durable storage backends for the versioned session record."""
from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from arena.types import StorageError


class Storage(Protocol):
    """Loads and overwrites one whole record."""

    def load(self) -> dict[str, Any] | None:
        ...

    def save(self, record: dict[str, Any]) -> None:
        ...


class MemoryStorage:
    """Keeps the last saved record in memory. ``fail`` simulates an outage."""

    def __init__(self, record: dict[str, Any] | None = None) -> None:
        self._record = copy.deepcopy(record)
        self.saves = 0
        self.fail = False

    def load(self) -> dict[str, Any] | None:
        return copy.deepcopy(self._record)

    def save(self, record: dict[str, Any]) -> None:
        if self.fail:
            raise StorageError("memory storage unavailable")
        self._record = copy.deepcopy(record)
        self.saves += 1


class JsonFileStorage:
    """One JSON file, replaced atomically on every save."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any] | None:
        if not self._path.exists():
            return None
        try:
            return json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"cannot read {self._path}: {exc}") from exc

    def save(self, record: dict[str, Any]) -> None:
        text = json.dumps(record, sort_keys=True)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=str(self._path.parent), prefix=".tmp_", suffix=".json"
            )
            os.close(fd)
            tmp = Path(tmp_name)
            try:
                tmp.write_text(text, encoding="utf-8")
                os.replace(tmp, self._path)
            finally:
                if tmp.exists():
                    tmp.unlink()
        except OSError as exc:
            raise StorageError(f"cannot write {self._path}: {exc}") from exc
