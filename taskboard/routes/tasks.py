"""Task mutation endpoints: add, delete, toggle, list."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from taskboard.app.core.errors import InvalidInput
from taskboard.app.deps import get_task_store
from taskboard.app.schemas import RecordOut
from taskboard.app.store import TaskStore, parse_task_id

router = APIRouter(tags=["tasks"])


def _http400(exc: InvalidInput) -> HTTPException:
    return HTTPException(status_code=400, detail=exc.message)


@router.api_route("/add", methods=["GET", "POST"])
def add_task(
    task: Optional[str] = Query(default=None),
    store: TaskStore = Depends(get_task_store),
) -> Response:
    try:
        store.create(task or "")
    except InvalidInput as exc:
        raise _http400(exc) from exc
    return Response(status_code=200)


@router.api_route("/delete", methods=["GET", "POST"])
def delete_task(
    raw_id: Optional[str] = Query(default=None, alias="id"),
    store: TaskStore = Depends(get_task_store),
) -> Response:
    try:
        task_id = parse_task_id(raw_id)
    except InvalidInput as exc:
        raise _http400(exc) from exc
    store.delete(task_id)
    return Response(status_code=200)


@router.api_route("/toggle", methods=["GET", "POST"])
def toggle_task(
    raw_id: Optional[str] = Query(default=None, alias="id"),
    store: TaskStore = Depends(get_task_store),
) -> Response:
    try:
        task_id = parse_task_id(raw_id)
    except InvalidInput as exc:
        raise _http400(exc) from exc
    store.toggle(task_id)
    return Response(status_code=200)


@router.get("/list", response_model=list[RecordOut])
def list_tasks(store: TaskStore = Depends(get_task_store)):
    return [RecordOut.from_record(record) for record in store.list()]
