from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskboard.api.schemas import BAD_REQUEST, NOT_FOUND
from taskboard.db.session import get_db
from . import schemas, services

router = APIRouter()


@router.get(
    "",
    response_model=list[schemas.StatusOut],
    responses=NOT_FOUND,
    summary="List all statuses for a board",
)
def read_statuses(board_id: UUID, db: Session = Depends(get_db)):
    return services.get_statuses_by_board(db, board_id)


@router.get(
    "/{status_id}",
    response_model=schemas.StatusOut,
    responses=NOT_FOUND,
    summary="Get status by ID",
)
def read_status(board_id: UUID, status_id: UUID, db: Session = Depends(get_db)):
    return services.get_status(db, board_id, status_id)


@router.post(
    "",
    response_model=schemas.StatusOut,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Create a new status for a board",
)
def create_status(board_id: UUID, board_status: schemas.StatusCreate, db: Session = Depends(get_db)):
    return services.create_status(db, board_id, board_status)


@router.put(
    "/{status_id}",
    response_model=schemas.StatusOut,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Update a board status",
)
def update_status(
    board_id: UUID,
    status_id: UUID,
    board_status: schemas.StatusUpdate,
    db: Session = Depends(get_db),
):
    return services.update_status(db, board_id, status_id, board_status)


@router.delete(
    "/{status_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
    summary="Delete a board status and its tasks",
)
def delete_status(board_id: UUID, status_id: UUID, db: Session = Depends(get_db)):
    services.delete_status(db, board_id, status_id)
