from __future__ import annotations

import itertools

from src.taskmanager.domain.exceptions import TaskNotFoundError
from src.taskmanager.domain.models.task import Task
from src.taskmanager.domain.repositories import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    """Process-local task storage. Ids come from a counter and are never reused."""

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._ids = itertools.count(1)

    async def find_all(self) -> list[Task]:
        return [task.model_copy() for task in self._tasks.values()]

    async def find_by_id(self, task_id: int) -> Task | None:
        task = self._tasks.get(task_id)
        return task.model_copy() if task is not None else None

    async def save(self, task: Task) -> Task:
        stored = task.model_copy()
        if stored.id is None:
            stored.id = next(self._ids)
        elif stored.id not in self._tasks:
            raise TaskNotFoundError(stored.id)
        self._tasks[stored.id] = stored
        return stored.model_copy()

    async def delete(self, task: Task) -> None:
        if task.id is not None:
            self._tasks.pop(task.id, None)
