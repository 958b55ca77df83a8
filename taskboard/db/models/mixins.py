import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Uuid


def utcnow():
    return datetime.now(timezone.utc)


def _same_as_created(context):
    # created_at is computed first, so a new row starts with equal timestamps
    return context.get_current_parameters().get("created_at") or utcnow()


class IdMixin:
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_same_as_created, onupdate=utcnow, nullable=False)
