from __future__ import annotations

from typing import Protocol

from src.taskmanager.domain.models.task import Task


class TaskRepository(Protocol):
    """Repository contract for persisting and looking up tasks."""

    async def find_all(self) -> list[Task]:
        """Return every stored task."""

    async def find_by_id(self, task_id: int) -> Task | None:
        """Return the task identified by ``task_id`` or ``None`` when absent."""

    async def save(self, task: Task) -> Task:
        """
        Insert the task when it has no id, otherwise update it. Returns the stored task.

        Raises ``TaskNotFoundError`` when updating a task that is no longer stored.
        """

    async def delete(self, task: Task) -> None:
        """Remove the stored task."""
