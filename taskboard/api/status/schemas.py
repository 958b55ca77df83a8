from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from taskboard.api.schemas import CamelModel, reject_null
from taskboard.api.task.schemas import TaskWithSubTasksOut


class StatusCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    position: int = Field(..., ge=0, strict=True)


class StatusUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    position: Optional[int] = Field(None, ge=0, strict=True)

    @field_validator("name", "position")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class StatusOut(CamelModel):
    id: UUID
    board_id: UUID
    name: str
    description: Optional[str]
    position: int
    created_at: datetime
    updated_at: datetime


class StatusWithTasksOut(StatusOut):
    tasks: list[TaskWithSubTasksOut]
