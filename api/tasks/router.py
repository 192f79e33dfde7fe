"""
Task API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Body, Response, status

from . import schemas, service

router = APIRouter()


@router.get("/tasks")
async def list_tasks() -> list[schemas.TaskResponse]:
    return await service.list_tasks()


@router.get("/tasks/{task_id}")
async def get_task(task_id: int) -> schemas.TaskResponse:
    return await service.get_task(task_id)


@router.post("/tasks", status_code=status.HTTP_201_CREATED)
async def create_task(
    payload: schemas.TaskCreateRequest | None = Body(default=None),
) -> schemas.TaskResponse:
    # A missing body is treated like a body without a title.
    return await service.create_task(payload or schemas.TaskCreateRequest())


@router.put("/tasks/{task_id}")
async def update_task(
    task_id: int,
    payload: schemas.TaskUpdateRequest | None = Body(default=None),
) -> schemas.TaskResponse:
    return await service.update_task(task_id, payload or schemas.TaskUpdateRequest())


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int) -> Response:
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
