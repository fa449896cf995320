import logging
from typing import Optional

TASK_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s [%(op)s #%(task_id)s] %(message)s"

_handler: Optional[logging.Handler] = None


class TaskContextFilter(logging.Filter):
    """Give every record the ``op``/``task_id`` fields the format expects."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "op"):
            record.op = "-"
        if not hasattr(record, "task_id"):
            record.task_id = "-"
        return True


def resolve_level(name: Optional[str]) -> int:
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[str] = None) -> logging.Handler:
    """Attach the task-aware stderr handler to the root logger once; later calls only relevel."""
    global _handler

    resolved = resolve_level(level)
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.addFilter(TaskContextFilter())
        _handler.setFormatter(logging.Formatter(TASK_LOG_FORMAT))
        root.addHandler(_handler)
    root.setLevel(resolved)

    # uvicorn installs its own handlers; keep its access log at the app's level.
    logging.getLogger("uvicorn.access").setLevel(resolved)
    return _handler
