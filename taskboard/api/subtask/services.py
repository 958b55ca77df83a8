import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from taskboard.core.errors import NotFoundError
from taskboard.db.models import SubTask
from taskboard.db.models.mixins import utcnow
from . import schemas

logger = logging.getLogger(__name__)


def get_subtasks(db: Session, task_id: Optional[UUID] = None):
    query = db.query(SubTask)
    if task_id is not None:
        query = query.filter(SubTask.task_id == task_id)
    return query.order_by(SubTask.created_at.asc()).all()


def get_subtask(db: Session, subtask_id: UUID):
    subtask = db.query(SubTask).filter(SubTask.id == subtask_id).first()
    if not subtask:
        raise NotFoundError.for_resource("Subtask")
    return subtask


def create_subtask(db: Session, subtask: schemas.SubTaskCreate):
    db_subtask = SubTask(**subtask.model_dump())
    db.add(db_subtask)
    db.commit()
    db.refresh(db_subtask)
    logger.info("Created subtask %s on task %s", db_subtask.id, db_subtask.task_id)
    return db_subtask


def update_subtask(db: Session, subtask_id: UUID, subtask: schemas.SubTaskUpdate):
    db_subtask = get_subtask(db, subtask_id)
    for key, value in subtask.model_dump(exclude_unset=True).items():
        setattr(db_subtask, key, value)
    db_subtask.updated_at = utcnow()
    db.commit()
    db.refresh(db_subtask)
    logger.info("Updated subtask %s", subtask_id)
    return db_subtask


def delete_subtask(db: Session, subtask_id: UUID):
    db_subtask = get_subtask(db, subtask_id)
    db.delete(db_subtask)
    db.commit()
    logger.info("Deleted subtask %s", subtask_id)
