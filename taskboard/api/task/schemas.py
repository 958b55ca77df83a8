from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from taskboard.api.schemas import CamelModel, reject_null
from taskboard.api.subtask.schemas import SubTaskOut


class TaskCreate(CamelModel):
    board_status_id: UUID
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    position: int = Field(..., ge=0, strict=True)


class TaskUpdate(CamelModel):
    # Changing board_status_id moves the task to another column
    board_status_id: Optional[UUID] = None
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    position: Optional[int] = Field(None, ge=0, strict=True)

    @field_validator("board_status_id", "title", "position")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class TaskOut(CamelModel):
    id: UUID
    board_status_id: UUID
    title: str
    description: Optional[str]
    position: int
    created_at: datetime
    updated_at: datetime


class TaskWithSubTasksOut(TaskOut):
    sub_tasks: list[SubTaskOut]
