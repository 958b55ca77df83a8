import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session, selectinload

from taskboard.core.errors import NotFoundError
from taskboard.db.models import Task
from taskboard.db.models.mixins import utcnow
from . import schemas

logger = logging.getLogger(__name__)


def get_tasks(db: Session, board_status_id: Optional[UUID] = None):
    query = db.query(Task).options(selectinload(Task.sub_tasks))
    if board_status_id is not None:
        query = query.filter(Task.board_status_id == board_status_id)
    return query.order_by(Task.position.asc(), Task.created_at.asc()).all()


def get_task(db: Session, task_id: UUID):
    task = (
        db.query(Task)
        .options(selectinload(Task.sub_tasks))
        .filter(Task.id == task_id)
        .first()
    )
    if not task:
        raise NotFoundError.for_resource("Task")
    return task


def create_task(db: Session, task: schemas.TaskCreate):
    # board_status_id is enforced by the foreign key, not looked up first
    db_task = Task(**task.model_dump())
    db.add(db_task)
    db.commit()
    db.refresh(db_task)
    logger.info("Created task %s in status %s", db_task.id, db_task.board_status_id)
    return db_task


def update_task(db: Session, task_id: UUID, task: schemas.TaskUpdate):
    db_task = get_task(db, task_id)
    for key, value in task.model_dump(exclude_unset=True).items():
        setattr(db_task, key, value)
    db_task.updated_at = utcnow()
    db.commit()
    db.refresh(db_task)
    logger.info("Updated task %s", task_id)
    return db_task


def delete_task(db: Session, task_id: UUID):
    db_task = get_task(db, task_id)
    db.delete(db_task)
    db.commit()
    logger.info("Deleted task %s", task_id)
