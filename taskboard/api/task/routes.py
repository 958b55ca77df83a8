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
    response_model=list[schemas.TaskWithSubTasksOut],
    responses=BAD_REQUEST,
    summary="List all tasks",
)
def read_tasks(
    board_status_id: Optional[UUID] = Query(None, alias="boardStatusId"),
    db: Session = Depends(get_db),
):
    return services.get_tasks(db, board_status_id)


@router.get(
    "/{task_id}",
    response_model=schemas.TaskWithSubTasksOut,
    responses=NOT_FOUND,
    summary="Get task by ID",
)
def read_task(task_id: UUID, db: Session = Depends(get_db)):
    return services.get_task(db, task_id)


@router.post(
    "",
    response_model=schemas.TaskOut,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Create a new task",
)
def create_task(task: schemas.TaskCreate, db: Session = Depends(get_db)):
    return services.create_task(db, task)


@router.put(
    "/{task_id}",
    response_model=schemas.TaskOut,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Update a task",
)
def update_task(task_id: UUID, task: schemas.TaskUpdate, db: Session = Depends(get_db)):
    return services.update_task(db, task_id, task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
    summary="Delete a task and its subtasks",
)
def delete_task(task_id: UUID, db: Session = Depends(get_db)):
    services.delete_task(db, task_id)
