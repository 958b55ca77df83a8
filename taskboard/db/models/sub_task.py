from sqlalchemy import Column, Boolean, Text, ForeignKey, Uuid, false
from sqlalchemy.orm import relationship

from taskboard.db.session import Base
from .mixins import IdMixin, TimestampMixin


class SubTask(IdMixin, TimestampMixin, Base):
    __tablename__ = "sub_tasks"

    description = Column(Text, nullable=False)
    is_completed = Column(Boolean, default=False, server_default=false(), nullable=False)

    # Foreign Key
    task_id = Column(Uuid, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    task = relationship("Task", back_populates="sub_tasks")
