from sqlalchemy import Column, Integer, String, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from taskboard.db.session import Base
from .mixins import IdMixin, TimestampMixin


class Task(IdMixin, TimestampMixin, Base):
    __tablename__ = "tasks"

    title = Column(String(200), nullable=False)
    description = Column(String(1000), nullable=True)
    position = Column(Integer, nullable=False)

    # Reassigning moves the task to another column, possibly on another board
    board_status_id = Column(Uuid, ForeignKey("board_statuses.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    board_status = relationship("BoardStatus", back_populates="tasks")
    sub_tasks = relationship(
        "SubTask",
        back_populates="task",
        order_by="SubTask.created_at",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
