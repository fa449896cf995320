"""Domain value types for the task registry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """A single task.

    Fields:
        id: Positive integer assigned by the store, never reused.
        description: Text given at creation; there is no edit operation.
        done: Completion flag, flipped only by toggle.
    """

    id: int
    description: str
    done: bool = False
