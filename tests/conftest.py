from __future__ import annotations

import importlib
from collections.abc import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.taskmanager.domain.exceptions import TaskNotFoundError
from src.taskmanager.domain.models.task import Task
from src.taskmanager.domain.repositories import TaskRepository
from src.taskmanager.presentation.errors import register_exception_handlers


class StubTaskRepository(TaskRepository):
    """Simple in-memory TaskRepository replacement for tests."""

    def __init__(self) -> None:
        self.tasks: dict[int, Task] = {}
        self.saved: list[Task] = []
        self.deleted: list[int] = []
        self._counter = 0

    async def find_all(self) -> list[Task]:
        return [task.model_copy() for task in self.tasks.values()]

    async def find_by_id(self, task_id: int) -> Task | None:
        task = self.tasks.get(task_id)
        return task.model_copy() if task is not None else None

    async def save(self, task: Task) -> Task:
        stored = task.model_copy()
        if stored.id is None:
            self._counter += 1
            stored.id = self._counter
        elif stored.id not in self.tasks:
            raise TaskNotFoundError(stored.id)
        self.tasks[stored.id] = stored
        self.saved.append(stored)
        return stored.model_copy()

    async def delete(self, task: Task) -> None:
        if task.id is not None:
            self.tasks.pop(task.id, None)
            self.deleted.append(task.id)


@pytest.fixture
def env_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide environment variables for the settings classes."""
    monkeypatch.setenv("APP_NAME", "Test API")
    monkeypatch.setenv("APP_VERSION", "0.1.0")
    monkeypatch.setenv("STORAGE_BACKEND", "memory")


def _patch_inject_instance(
    monkeypatch: pytest.MonkeyPatch,
    repository_stub: StubTaskRepository,
) -> Callable[[object], object]:
    """Patch `inject.instance` to always return the stub repository."""
    import inject

    def fake_instance(interface: object) -> object:
        if interface is TaskRepository:
            return repository_stub
        raise RuntimeError(f"Unexpected dependency request: {interface}")

    monkeypatch.setattr(inject, "instance", fake_instance)
    return fake_instance


@pytest.fixture
def repository_stub() -> StubTaskRepository:
    return StubTaskRepository()


@pytest.fixture
def stubbed_services(
    env_settings: None,
    monkeypatch: pytest.MonkeyPatch,
    repository_stub: StubTaskRepository,
):
    """Reload service module with stubbed repository injection."""
    _patch_inject_instance(monkeypatch, repository_stub)

    services_module = importlib.reload(
        importlib.import_module("src.taskmanager.application.services")
    )
    return services_module, repository_stub


@pytest.fixture
def api_client(
    env_settings: None,
    monkeypatch: pytest.MonkeyPatch,
    repository_stub: StubTaskRepository,
):
    """FastAPI test client with services wired to the stub repository."""
    _patch_inject_instance(monkeypatch, repository_stub)

    # Reload modules so module-level singletons pick up the patched injector.
    services_module = importlib.reload(importlib.import_module("src.taskmanager.application.services"))  # noqa: F841
    routes_module = importlib.reload(importlib.import_module("src.taskmanager.presentation.routes"))

    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(routes_module.router)
    client = TestClient(app)
    return client, repository_stub
