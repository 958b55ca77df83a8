import logging
from uuid import UUID

from sqlalchemy.orm import Session, selectinload

from taskboard.core.errors import NotFoundError
from taskboard.db.models import Board, BoardStatus, Task
from taskboard.db.models.mixins import utcnow
from . import schemas

logger = logging.getLogger(__name__)


def get_boards(db: Session):
    return db.query(Board).order_by(Board.created_at.desc()).all()


def find_board(db: Session, board_id: UUID):
    return db.query(Board).filter(Board.id == board_id).first()


def get_board(db: Session, board_id: UUID):
    board = find_board(db, board_id)
    if not board:
        raise NotFoundError.for_resource("Board")
    return board


def get_board_tree(db: Session, board_id: UUID):
    """Board with statuses and tasks by position, subtasks by creation."""
    board = (
        db.query(Board)
        .options(
            selectinload(Board.statuses)
            .selectinload(BoardStatus.tasks)
            .selectinload(Task.sub_tasks)
        )
        .filter(Board.id == board_id)
        .first()
    )
    if not board:
        raise NotFoundError.for_resource("Board")
    return board


def create_board(db: Session, board: schemas.BoardCreate):
    db_board = Board(**board.model_dump())
    db.add(db_board)
    db.commit()
    db.refresh(db_board)
    logger.info("Created board %s", db_board.id)
    return db_board


def update_board(db: Session, board_id: UUID, board: schemas.BoardUpdate):
    db_board = get_board(db, board_id)
    for key, value in board.model_dump(exclude_unset=True).items():
        setattr(db_board, key, value)
    db_board.updated_at = utcnow()
    db.commit()
    db.refresh(db_board)
    logger.info("Updated board %s", db_board.id)
    return db_board


def delete_board(db: Session, board_id: UUID):
    # Statuses, tasks and subtasks go with it through ON DELETE CASCADE
    db_board = get_board(db, board_id)
    db.delete(db_board)
    db.commit()
    logger.info("Deleted board %s", board_id)
