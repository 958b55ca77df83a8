from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from taskboard.api.schemas import CamelModel, reject_null


class SubTaskCreate(CamelModel):
    task_id: UUID
    description: str = Field(..., min_length=1)
    is_completed: bool = Field(False, strict=True)


class SubTaskUpdate(CamelModel):
    description: Optional[str] = Field(None, min_length=1)
    is_completed: Optional[bool] = Field(None, strict=True)

    @field_validator("description", "is_completed")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class SubTaskOut(CamelModel):
    id: UUID
    task_id: UUID
    description: str
    is_completed: bool
    created_at: datetime
    updated_at: datetime
