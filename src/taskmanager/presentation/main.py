from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

import inject

from src.setup.api_config import get_api_settings
from src.setup.app_config import configure_di
from src.setup.db_config import get_database_settings
from src.setup.logging_config import setup_logging
from src.taskmanager.infrastructure.postgres.orm import PostgresOrm
from src.taskmanager.presentation.errors import register_exception_handlers

settings = get_api_settings()
db_settings = get_database_settings()
setup_logging(settings.LOG_LEVEL)
configure_di(db_settings)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    if db_settings.STORAGE_BACKEND != "postgres":
        yield
        return
    orm = inject.instance(PostgresOrm)
    if db_settings.DB_CREATE_SCHEMA:
        await orm.create_schema()
    try:
        yield
    finally:
        await orm.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Task tracking API",
    lifespan=lifespan,
)
register_exception_handlers(app)

from src.taskmanager.presentation.routes import router as api_router  # noqa: E402

app.include_router(api_router, prefix="")
