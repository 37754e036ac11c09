import logging
from typing import cast

import inject

from src.taskmanager.domain.exceptions import TaskNotFoundError
from src.taskmanager.domain.models import Task
from src.taskmanager.domain.repositories import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Applies task rules on top of the configured task repository."""

    def __init__(self, repository: TaskRepository | None = None) -> None:
        if repository is None:
            repository = cast(TaskRepository, inject.instance(TaskRepository))
        self._repository = repository

    async def get_all_tasks(self) -> list[Task]:
        return await self._repository.find_all()

    async def get_task_by_id(self, task_id: int) -> Task:
        """Return the task identified by ``task_id`` or raise ``TaskNotFoundError``."""
        task = await self._repository.find_by_id(task_id)
        if task is None:
            logger.warning("Task lookup missed", extra={"task_id": task_id})
            raise TaskNotFoundError(task_id)
        return task

    async def create_task(self, task: Task) -> Task:
        """
        Persist a new task. The storage layer assigns the id, so any id on
        the incoming task is discarded.
        """
        created = await self._repository.save(task.model_copy(update={"id": None}))
        logger.info("Task created", extra={"task_id": created.id})
        return created

    async def update_task(self, task_id: int, task_data: Task) -> Task:
        """Replace title and status of an existing task."""
        existing = await self.get_task_by_id(task_id)
        existing.title = task_data.title
        existing.status = task_data.status
        updated = await self._repository.save(existing)
        logger.info("Task updated", extra={"task_id": task_id})
        return updated

    async def update_task_status(self, task_id: int, status: str | None) -> Task:
        """Set only the status of an existing task."""
        existing = await self.get_task_by_id(task_id)
        existing.status = status
        updated = await self._repository.save(existing)
        logger.info("Task status updated", extra={"task_id": task_id, "status": status})
        return updated

    async def delete_task(self, task_id: int) -> None:
        existing = await self.get_task_by_id(task_id)
        await self._repository.delete(existing)
        logger.info("Task deleted", extra={"task_id": task_id})
