from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from taskboard.db.session import Base
from .mixins import IdMixin, TimestampMixin


class Board(IdMixin, TimestampMixin, Base):
    __tablename__ = "boards"

    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)

    # Relationships
    statuses = relationship(
        "BoardStatus",
        back_populates="board",
        order_by="[BoardStatus.position, BoardStatus.created_at]",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
