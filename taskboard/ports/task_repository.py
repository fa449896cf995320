"""Port interface for task persistence (snapshot boundary)."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from taskboard.app.models import Record


@runtime_checkable
class ITaskRepository(Protocol):
    """Snapshot persistence: the whole task list is written and read at once."""

    def save(self, records: Sequence[Record]) -> None:
        """Replace the stored snapshot with ``records``; may raise OSError."""

    def load(self) -> list[Record]:
        """Return the last stored snapshot, or an empty list when there is none."""
