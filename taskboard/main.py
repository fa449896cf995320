from typing import Optional

from fastapi import Depends, FastAPI

from taskboard.app.config import get_settings
from taskboard.app.core.logging_config import configure_logging
from taskboard.app.deps import get_task_repository, get_task_store
from taskboard.app.store import TaskStore
from taskboard.routes import tasks


def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """Build the HTTP app; without ``store`` one is loaded from settings at startup."""

    app = FastAPI(
        title="Taskboard",
        version="1.0.0",
        docs_url="/docs",
        redoc_url=None,
    )
    if store is not None:
        app.state.task_store = store

    @app.on_event("startup")
    def on_startup() -> None:
        settings = get_settings()
        configure_logging(settings.app_log_level)
        if getattr(app.state, "task_store", None) is None:
            app.state.task_store = TaskStore.load(get_task_repository(settings))

    app.include_router(tasks.router)

    @app.get("/healthz")
    def healthz(store: TaskStore = Depends(get_task_store)) -> dict:
        return {"status": "ok", "tasks": len(store), "next_id": store.next_id}

    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.app_log_level)
    uvicorn.run("taskboard.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
