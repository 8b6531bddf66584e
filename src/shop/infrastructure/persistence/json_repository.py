"""Shared file handling for the JSON-file-backed repositories.

Each repository owns one JSON file holding a list of records keyed by
``"id"``.  Every call reads the file afresh, so entities handed out are
always detached from storage.

Writes are read-modify-write cycles done under the lock file of the
directory holding the JSON file (``.lock``), the same lock a
``JsonUnitOfWork`` on that directory holds for its whole lifetime.  Files
are replaced atomically, so unlocked readers never see a half-written
file.
"""

from __future__ import annotations

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

from filelock import FileLock

from shop.domain.exceptions import EntityNotFoundError

T = TypeVar("T")

LOCK_FILE = ".lock"
DEFAULT_LOCK_TIMEOUT = 10.0


def directory_lock(directory: Path, timeout: float = DEFAULT_LOCK_TIMEOUT) -> FileLock:
    """Inter-process lock guarding every JSON file in ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    return FileLock(str(directory / LOCK_FILE), timeout=timeout)


class JsonRepository(ABC, Generic[T]):

    not_found_error: type[EntityNotFoundError] = EntityNotFoundError
    entity_name = "Entity"

    def __init__(
        self, file_path: Path, lock_timeout: float = DEFAULT_LOCK_TIMEOUT
    ) -> None:
        self._file_path = file_path
        self._lock = directory_lock(file_path.parent, lock_timeout)
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- Generic CRUD ---------------------------------------------------------

    def _get(self, entity_id: str) -> T | None:
        for raw in self._load_raw():
            if raw["id"] == entity_id:
                return self._to_domain(raw)
        return None

    def _list(self) -> list[T]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def _upsert(self, entity_id: str, entity: T, must_exist: bool) -> None:
        with self._lock:
            records = self._load_raw()
            for i, raw in enumerate(records):
                if raw["id"] == entity_id:
                    records[i] = self._to_raw(entity)
                    break
            else:
                if must_exist:
                    raise self.not_found_error(
                        f"{self.entity_name} '{entity_id}' not found"
                    )
                records.append(self._to_raw(entity))
            self._persist_raw(records)

    def _exists(self, entity_id: str) -> bool:
        return any(raw["id"] == entity_id for raw in self._load_raw())

    def _delete(self, entity_id: str) -> None:
        with self._lock:
            records = self._load_raw()
            remaining = [raw for raw in records if raw["id"] != entity_id]
            if len(remaining) == len(records):
                raise self.not_found_error(f"{self.entity_name} '{entity_id}' not found")
            self._persist_raw(remaining)

    # --- Serialization (per aggregate) ----------------------------------------

    @staticmethod
    @abstractmethod
    def _to_raw(entity: T) -> dict:
        """Flatten an entity into a JSON-ready record."""

    @staticmethod
    @abstractmethod
    def _to_domain(raw: dict) -> T:
        """Rebuild an entity from its stored record."""

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._file_path.name}.", dir=self._file_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(records, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        with self._lock:
            if not self._file_path.exists():
                self._persist_raw([])
