"""Dependency providers wiring the task store into routes."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Request

from taskboard.adapters.task_repository_file import FileTaskRepository
from taskboard.adapters.task_repository_memory import MemoryTaskRepository
from taskboard.app.config import Settings, get_settings
from taskboard.app.store import TaskStore
from taskboard.ports.task_repository import ITaskRepository

logger = logging.getLogger(__name__)


def get_task_repository(settings: Optional[Settings] = None) -> ITaskRepository:
    """Return the task repository implementation for the configured backend."""
    settings = settings or get_settings()
    backend = (settings.task_repo_backend or "").lower()
    backend_label = backend or "file"
    logger.info("TaskRepository backend=%s", backend_label)
    if backend == "memory":
        return MemoryTaskRepository()
    return FileTaskRepository(settings.tasks_file)


def get_task_store(request: Request) -> TaskStore:
    """Return the store attached to the running app at startup."""
    store = getattr(request.app.state, "task_store", None)
    if store is None:
        raise RuntimeError("task store not initialised; app startup did not run")
    return store
