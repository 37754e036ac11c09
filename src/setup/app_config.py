import inject

from src.setup.db_config import DatabaseSettings, get_database_settings
from src.taskmanager.domain.repositories import TaskRepository
from src.taskmanager.infrastructure.memory.repositories import InMemoryTaskRepository
from src.taskmanager.infrastructure.postgres.orm import PostgresOrm
from src.taskmanager.infrastructure.postgres.repositories import PostgresTaskRepository


def configure_di(settings: DatabaseSettings | None = None) -> None:
    """Bind the task repository for the configured storage backend."""
    if settings is None:
        settings = get_database_settings()

    def _config(binder: inject.Binder) -> None:
        if settings.STORAGE_BACKEND == "memory":
            binder.bind(TaskRepository, InMemoryTaskRepository())
            return
        orm = PostgresOrm(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        binder.bind(PostgresOrm, orm)
        binder.bind(TaskRepository, PostgresTaskRepository(orm))

    inject.configure(_config, clear=True)
