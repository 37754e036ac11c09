class TaskNotFoundError(Exception):
    """Raised when a task identifier does not exist in storage."""
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task not found, id: {task_id}")
        self.task_id = task_id
