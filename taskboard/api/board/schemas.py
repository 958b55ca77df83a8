from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from taskboard.api.schemas import CamelModel, reject_null
from taskboard.api.status.schemas import StatusWithTasksOut


class BoardCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


class BoardUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class BoardOut(CamelModel):
    id: UUID
    name: str
    description: Optional[str]
    created_at: datetime
    updated_at: datetime


class BoardDetailOut(BoardOut):
    statuses: list[StatusWithTasksOut]
