"""Concurrent task store mirrored to a snapshot repository.

Every operation runs under one ``threading.Lock``. Mutators call the
repository's ``save`` while still holding the lock, so the snapshot on disk
always matches some committed in-memory state and two mutations never
interleave. Save failures are logged and swallowed: memory stays the source
of truth and the next successful save brings the snapshot back in line.
"""

from __future__ import annotations

import dataclasses
import logging
import re
import threading
from typing import Iterable, Optional

from taskboard.app.core.errors import InvalidInput
from taskboard.app.models import Record
from taskboard.ports.task_repository import ITaskRepository

logger = logging.getLogger(__name__)

_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")


def parse_task_id(raw: Optional[str]) -> int:
    """Turn a request's ``id`` parameter into an int or raise InvalidInput."""

    if raw is None or raw == "":
        raise InvalidInput("id is required")
    if not _TASK_ID_RE.fullmatch(raw):
        raise InvalidInput(f"id must be an integer, got {raw!r}")
    return int(raw)


class TaskStore:
    """Ordered task list plus the id counter, guarded by a single lock."""

    def __init__(self, repository: ITaskRepository, records: Iterable[Record] = ()) -> None:
        self._repository = repository
        self._lock = threading.Lock()
        self._records: list[Record] = []
        seen: set[int] = set()
        for record in records:
            if record.id <= 0 or record.id in seen:
                logger.warning("dropping invalid or duplicate id %s from snapshot", record.id)
                continue
            seen.add(record.id)
            self._records.append(record)
        self._next_id = max(seen, default=0) + 1

    @classmethod
    def load(cls, repository: ITaskRepository) -> "TaskStore":
        records = repository.load()
        store = cls(repository, records)
        logger.info("loaded %d task(s), next id %d", len(store._records), store._next_id)
        return store

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def create(self, description: str) -> Record:
        if description is None or not description.strip():
            raise InvalidInput("task description must not be empty")
        with self._lock:
            record = Record(id=self._next_id, description=description)
            self._next_id += 1
            self._records.append(record)
            self._persist("create", record.id)
        logger.info("task created", extra={"op": "create", "task_id": record.id})
        return record

    def delete(self, task_id: int) -> bool:
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == task_id:
                    del self._records[index]
                    self._persist("delete", task_id)
                    break
            else:
                logger.debug("delete of unknown id ignored", extra={"op": "delete", "task_id": task_id})
                return False
        logger.info("task deleted", extra={"op": "delete", "task_id": task_id})
        return True

    def toggle(self, task_id: int) -> Optional[Record]:
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == task_id:
                    updated = dataclasses.replace(record, done=not record.done)
                    self._records[index] = updated
                    self._persist("toggle", task_id)
                    break
            else:
                logger.debug("toggle of unknown id ignored", extra={"op": "toggle", "task_id": task_id})
                return None
        logger.info("task toggled done=%s", updated.done, extra={"op": "toggle", "task_id": task_id})
        return updated

    def list(self) -> list[Record]:
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _persist(self, op: str, task_id: int) -> None:
        # Caller holds self._lock.
        try:
            self._repository.save(list(self._records))
        except (OSError, ValueError):
            logger.exception("snapshot save failed", extra={"op": op, "task_id": task_id})
