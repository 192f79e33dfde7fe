"""
Task business logic.

Validation happens before any store call; not-found is detected from empty
result sets.
"""

from __future__ import annotations

from core.errors import NotFoundError, ValidationError

from . import repository, schemas

TASK_NOT_FOUND = "Task not found"


def _to_task_response(row: dict) -> schemas.TaskResponse:
    description = row.get("description")
    return schemas.TaskResponse(
        id=int(row["id"]),
        title=str(row["title"]),
        description=None if description is None else str(description),
        completed=bool(row.get("completed", False)),
    )


def _is_blank(value: str | None) -> bool:
    return not (value or "").strip()


async def list_tasks() -> list[schemas.TaskResponse]:
    rows = await repository.list_tasks()
    return [_to_task_response(row) for row in rows]


async def get_task(task_id: int) -> schemas.TaskResponse:
    row = await repository.get_task(task_id)
    if row is None:
        raise NotFoundError(TASK_NOT_FOUND)
    return _to_task_response(row)


async def create_task(payload: schemas.TaskCreateRequest) -> schemas.TaskResponse:
    if _is_blank(payload.title):
        raise ValidationError("Title is required")
    if payload.description is not None and not isinstance(payload.description, str):
        raise ValidationError("Description must be a string")

    row = await repository.create_task(title=payload.title, description=payload.description)
    return _to_task_response(row)


def _validate_update(fields: dict) -> None:
    if not fields:
        raise ValidationError("No fields to update provided")
    if "title" in fields and _is_blank(fields["title"]):
        raise ValidationError("Title cannot be empty")
    if "completed" in fields and fields["completed"] is None:
        raise ValidationError("Completed must be a boolean")


async def update_task(task_id: int, payload: schemas.TaskUpdateRequest) -> schemas.TaskResponse:
    fields = payload.supplied_fields()
    _validate_update(fields)

    row = await repository.update_task(task_id, fields)
    if row is None:
        raise NotFoundError(TASK_NOT_FOUND)
    return _to_task_response(row)


async def delete_task(task_id: int) -> None:
    deleted = await repository.delete_task(task_id)
    if not deleted:
        raise NotFoundError(TASK_NOT_FOUND)
