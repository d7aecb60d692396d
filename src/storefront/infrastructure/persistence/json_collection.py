"""JSON-file-backed document collection.

One collection is one JSON file holding a list of records. Writes go
through a temporary file and an atomic rename so readers in other
processes never see a half-written file.

Subscribers get the full collection after every local write. Changes
made by other processes are picked up by ``poll()``, which compares the
file's modification stamp against the last one this process saw.
"""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

from storefront.domain.repository.subscription import (
    SnapshotCallback,
    SnapshotListeners,
    Unsubscribe,
)
from storefront.infrastructure.errors import PersistenceError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class JsonCollection(ABC, Generic[T]):

    def __init__(self, file_path: Path, actor: str | None = None) -> None:
        self._file_path = file_path
        self._actor = actor or "unknown"
        self._listeners: SnapshotListeners[T] = SnapshotListeners()
        self._ensure_file()
        self._seen_stamp = self._stamp()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def actor(self) -> str:
        """User id of the session this collection was opened for."""
        return self._actor

    # --- Serialization (per collection) ---------------------------------------

    @staticmethod
    @abstractmethod
    def _to_domain(raw: dict) -> T:
        """Rebuild a domain object from its stored record."""

    # --- Snapshots ------------------------------------------------------------

    def snapshot(self) -> list[T]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def subscribe(self, callback: SnapshotCallback) -> Unsubscribe:
        return self._listeners.add(callback, self.snapshot())

    def poll(self) -> bool:
        """Publish a snapshot if another process changed the file.

        Returns True when subscribers were notified.
        """
        stamp = self._stamp()
        if stamp == self._seen_stamp:
            return False
        logger.debug("%s changed on disk", self._file_path)
        self._seen_stamp = stamp
        self._listeners.publish(self.snapshot())
        return True

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.exception("Failed to read %s", self._file_path)
            raise PersistenceError(f"Could not read {self._file_path.name}") from exc
        if not isinstance(records, list):
            raise PersistenceError(f"{self._file_path.name} does not hold a list of records")
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            logger.exception("Failed to write %s", self._file_path)
            raise PersistenceError(f"Could not write {self._file_path.name}") from exc

        logger.debug("%s wrote %d record(s) to %s", self._actor, len(records), self._file_path.name)
        self._seen_stamp = self._stamp()
        self._listeners.publish(self.snapshot())

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            logger.exception("Failed to create %s", self._file_path)
            raise PersistenceError(f"Could not create {self._file_path.name}") from exc

    def _stamp(self) -> tuple[int, int] | None:
        try:
            stat = self._file_path.stat()
        except OSError:
            return None
        return stat.st_mtime_ns, stat.st_size
