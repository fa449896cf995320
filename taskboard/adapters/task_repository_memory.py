"""In-memory task repository for ephemeral runs."""

from __future__ import annotations

import threading
from typing import Sequence

from taskboard.app.models import Record
from taskboard.ports.task_repository import ITaskRepository


class MemoryTaskRepository(ITaskRepository):
    """Keeps the last saved snapshot in process memory; nothing survives exit."""

    def __init__(self, records: Sequence[Record] = ()) -> None:
        self._lock = threading.Lock()
        self._snapshot: tuple[Record, ...] = tuple(records)
        self.saves = 0

    def save(self, records: Sequence[Record]) -> None:
        with self._lock:
            self._snapshot = tuple(records)
            self.saves += 1

    def load(self) -> list[Record]:
        with self._lock:
            return list(self._snapshot)
