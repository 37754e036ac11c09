from __future__ import annotations

from fastapi import APIRouter, Path, Response, status

from src.taskmanager.application.services import TaskService
from src.taskmanager.domain.models import Task
from src.taskmanager.presentation.schemas import TaskCreateRequest, TaskUpdateRequest

router = APIRouter(prefix="/tasks", tags=["tasks"])

# Instantiate services once (simple DI)
_task_service = TaskService()

_NOT_FOUND = {404: {"description": "Task not found (plain text message)."}}


@router.get(
    "",
    response_model=list[Task],
    summary="List tasks",
)
async def get_all_tasks() -> list[Task]:
    """
    Returns every stored task.
    """
    return await _task_service.get_all_tasks()


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Get a task",
    responses=_NOT_FOUND,
)
async def get_task_by_id(task_id: int = Path(..., description="Task id")) -> Task:
    """
    Looks up a single task by id.
    """
    return await _task_service.get_task_by_id(task_id)


@router.post(
    "",
    response_model=Task,
    summary="Create a task",
    description="Stores a new task. The title must not be blank; the id is assigned by storage.",
    responses={400: {"description": "Validation failed."}},
)
async def create_task(body: TaskCreateRequest) -> Task:
    """
    Stores the task and echoes it back with its new id.
    """
    return await _task_service.create_task(body.to_domain())


@router.put(
    "/{task_id}",
    response_model=Task,
    summary="Update a task",
    description="Replaces title and status of an existing task.",
    responses=_NOT_FOUND,
)
async def update_task(
    body: TaskUpdateRequest, task_id: int = Path(..., description="Task id")
) -> Task:
    """
    Overwrites title and status of the task.
    """
    return await _task_service.update_task(task_id, body.to_domain())


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a task",
    responses=_NOT_FOUND,
)
async def delete_task(task_id: int = Path(..., description="Task id")) -> Response:
    """
    Removes the task. Responds with an empty body.
    """
    await _task_service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
