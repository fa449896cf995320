"""File-backed task repository (default backend)."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError

from taskboard.app.models import Record
from taskboard.app.schemas import RecordOut
from taskboard.ports.task_repository import ITaskRepository

logger = logging.getLogger(__name__)


def _atomic_write(path: Path, payload: list[dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    data = json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")
    with open(tmp_path, "wb") as handle:
        handle.write(data)
        handle.flush()
        os.fsync(handle.fileno())
    os.replace(tmp_path, path)


def _load_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


class FileTaskRepository(ITaskRepository):
    """Task snapshot persisted as a single JSON array on disk."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def save(self, records: Sequence[Record]) -> None:
        payload = [RecordOut.from_record(r).model_dump(by_alias=True) for r in records]
        _atomic_write(self._path, payload)

    def load(self) -> list[Record]:
        if not self._path.exists():
            logger.info("no snapshot at %s, starting empty", self._path)
            return []
        try:
            raw = _load_json(self._path)
        except (OSError, ValueError) as exc:
            logger.warning("unreadable snapshot %s, starting empty: %s", self._path, exc)
            return []
        if not isinstance(raw, list):
            logger.warning("snapshot %s is not a JSON array, starting empty", self._path)
            return []

        records: list[Record] = []
        for index, entry in enumerate(raw):
            try:
                item = RecordOut.model_validate(entry)
            except ValidationError as exc:
                logger.warning("skipping snapshot entry %d in %s: %s", index, self._path, exc)
                continue
            records.append(Record(id=item.id, description=item.task, done=item.done))
        return records
