from pydantic import BaseModel, Field


class Task(BaseModel):
    id: int | None = Field(default=None, description="Storage-assigned task identifier.")
    title: str = Field(description="Short label for the task.")
    status: str | None = Field(
        default=None, description="Free-form workflow state, e.g. 'To do'."
    )
