from __future__ import annotations

from sqlalchemy import select

from src.taskmanager.domain.exceptions import TaskNotFoundError
from src.taskmanager.domain.models.task import Task
from src.taskmanager.domain.repositories import TaskRepository
from src.taskmanager.infrastructure.postgres.mappers import OrmMapper
from src.taskmanager.infrastructure.postgres.orm import PostgresOrm, TaskRow


class PostgresTaskRepository(TaskRepository):
    """Postgres-backed task storage using SQLAlchemy async sessions."""

    def __init__(self, orm: PostgresOrm) -> None:
        self._orm = orm

    async def find_all(self) -> list[Task]:
        async with self._orm.session_factory() as session:
            result = await session.execute(select(TaskRow).order_by(TaskRow.id))
            rows = result.scalars().all()
        return [OrmMapper.to_domain_task(row) for row in rows]

    async def find_by_id(self, task_id: int) -> Task | None:
        async with self._orm.session_factory() as session:
            task_row = await session.get(TaskRow, task_id)
        if task_row is None:
            return None
        return OrmMapper.to_domain_task(task_row)

    async def save(self, task: Task) -> Task:
        """Insert a new row, or update the row matching ``task.id``."""
        async with self._orm.session_factory() as session:
            async with session.begin():
                if task.id is None:
                    task_row = OrmMapper.to_task_row(task)
                    session.add(task_row)
                else:
                    # Updates never recreate a row removed in the meantime.
                    task_row = await session.get(TaskRow, task.id)
                    if task_row is None:
                        raise TaskNotFoundError(task.id)
                    OrmMapper.apply_to_row(task_row, task)
                # Flush inside the transaction so the generated id is populated.
                await session.flush()
        return OrmMapper.to_domain_task(task_row)

    async def delete(self, task: Task) -> None:
        if task.id is None:
            return
        async with self._orm.session_factory() as session:
            async with session.begin():
                task_row = await session.get(TaskRow, task.id)
                if task_row is not None:
                    await session.delete(task_row)
