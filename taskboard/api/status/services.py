import logging
from uuid import UUID

from sqlalchemy.orm import Session

from taskboard.api.board.services import get_board
from taskboard.core.errors import NotFoundError
from taskboard.db.models import BoardStatus
from taskboard.db.models.mixins import utcnow
from . import schemas

logger = logging.getLogger(__name__)


def get_statuses_by_board(db: Session, board_id: UUID):
    get_board(db, board_id)
    return (
        db.query(BoardStatus)
        .filter(BoardStatus.board_id == board_id)
        .order_by(BoardStatus.position.asc(), BoardStatus.created_at.asc())
        .all()
    )


def get_status(db: Session, board_id: UUID, status_id: UUID):
    """A status is only visible under the board that owns it."""
    get_board(db, board_id)
    db_status = (
        db.query(BoardStatus)
        .filter(BoardStatus.id == status_id, BoardStatus.board_id == board_id)
        .first()
    )
    if not db_status:
        raise NotFoundError.for_resource("Status")
    return db_status


def create_status(db: Session, board_id: UUID, board_status: schemas.StatusCreate):
    get_board(db, board_id)
    db_status = BoardStatus(**board_status.model_dump(), board_id=board_id)
    db.add(db_status)
    db.commit()
    db.refresh(db_status)
    logger.info("Created status %s on board %s", db_status.id, board_id)
    return db_status


def update_status(db: Session, board_id: UUID, status_id: UUID, board_status: schemas.StatusUpdate):
    db_status = get_status(db, board_id, status_id)
    for key, value in board_status.model_dump(exclude_unset=True).items():
        setattr(db_status, key, value)
    db_status.updated_at = utcnow()
    db.commit()
    db.refresh(db_status)
    logger.info("Updated status %s", status_id)
    return db_status


def delete_status(db: Session, board_id: UUID, status_id: UUID):
    db_status = get_status(db, board_id, status_id)
    db.delete(db_status)
    db.commit()
    logger.info("Deleted status %s", status_id)
