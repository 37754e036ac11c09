from src.taskmanager.domain.models.task import Task

__all__ = [
    "Task",
]
