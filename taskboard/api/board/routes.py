from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskboard.api.schemas import BAD_REQUEST, NOT_FOUND
from taskboard.db.session import get_db
from . import schemas, services

router = APIRouter()


@router.get("", response_model=list[schemas.BoardOut], summary="List all boards")
def read_boards(db: Session = Depends(get_db)):
    return services.get_boards(db)


@router.get(
    "/{board_id}",
    response_model=schemas.BoardDetailOut,
    responses=NOT_FOUND,
    summary="Get a board with its statuses, tasks and subtasks",
)
def read_board(board_id: UUID, db: Session = Depends(get_db)):
    return services.get_board_tree(db, board_id)


@router.post(
    "",
    response_model=schemas.BoardOut,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Create a board",
)
def create_board(board: schemas.BoardCreate, db: Session = Depends(get_db)):
    return services.create_board(db, board)


@router.put(
    "/{board_id}",
    response_model=schemas.BoardOut,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Update a board",
)
def update_board(board_id: UUID, board: schemas.BoardUpdate, db: Session = Depends(get_db)):
    return services.update_board(db, board_id, board)


@router.delete(
    "/{board_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
    summary="Delete a board and everything on it",
)
def delete_board(board_id: UUID, db: Session = Depends(get_db)):
    services.delete_board(db, board_id)
