from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from taskboard.api.schemas import BAD_REQUEST, NOT_FOUND
from taskboard.db.session import get_db
from . import schemas, services

router = APIRouter()


@router.get(
    "",
    response_model=list[schemas.SubTaskOut],
    responses=BAD_REQUEST,
    summary="List all subtasks",
)
def read_subtasks(
    task_id: Optional[UUID] = Query(None, alias="taskId"),
    db: Session = Depends(get_db),
):
    return services.get_subtasks(db, task_id)


@router.get(
    "/{subtask_id}",
    response_model=schemas.SubTaskOut,
    responses=NOT_FOUND,
    summary="Get subtask by ID",
)
def read_subtask(subtask_id: UUID, db: Session = Depends(get_db)):
    return services.get_subtask(db, subtask_id)


@router.post(
    "",
    response_model=schemas.SubTaskOut,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Create a new subtask",
)
def create_subtask(subtask: schemas.SubTaskCreate, db: Session = Depends(get_db)):
    return services.create_subtask(db, subtask)


@router.put(
    "/{subtask_id}",
    response_model=schemas.SubTaskOut,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Update a subtask",
)
def update_subtask(subtask_id: UUID, subtask: schemas.SubTaskUpdate, db: Session = Depends(get_db)):
    return services.update_subtask(db, subtask_id, subtask)


@router.delete(
    "/{subtask_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
    summary="Delete a subtask",
)
def delete_subtask(subtask_id: UUID, db: Session = Depends(get_db)):
    services.delete_subtask(db, subtask_id)
