from pydantic import BaseModel, Field, field_validator

from src.taskmanager.domain.models import Task


class TaskCreateRequest(BaseModel):
    id: int | None = Field(default=None, description="Ignored; storage assigns the id.")
    title: str = Field(..., min_length=1, description="Task title, must not be blank.")
    status: str | None = Field(default=None, description="Free-form workflow state.")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    def to_domain(self) -> Task:
        return Task(title=self.title, status=self.status)


class TaskUpdateRequest(BaseModel):
    id: int | None = Field(default=None, description="Ignored; the path id wins.")
    title: str = Field(..., description="New task title.")
    status: str | None = Field(default=None, description="New workflow state.")

    def to_domain(self) -> Task:
        return Task(title=self.title, status=self.status)
