from sqlalchemy import Column, Integer, String, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from taskboard.db.session import Base
from .mixins import IdMixin, TimestampMixin


class BoardStatus(IdMixin, TimestampMixin, Base):
    __tablename__ = "board_statuses"

    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    position = Column(Integer, nullable=False)  # sort key, duplicates and gaps allowed

    # Foreign Key
    board_id = Column(Uuid, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    board = relationship("Board", back_populates="statuses")
    tasks = relationship(
        "Task",
        back_populates="board_status",
        order_by="[Task.position, Task.created_at]",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
