"""Domain errors and their HTTP mapping.

Every error renders as ``{"error": message}``. Services raise these directly;
store-level failures are translated by ``classify_integrity_error``.
"""

from sqlalchemy.exc import IntegrityError

# SQLSTATE codes reported by PostgreSQL drivers
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


class TaskBoardError(Exception):
    http_status = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"error": self.message}


class NotFoundError(TaskBoardError):
    http_status = 404
    default_message = "Record not found"

    @classmethod
    def for_resource(cls, resource: str) -> "NotFoundError":
        return cls(f"{resource} not found")


class ConflictError(TaskBoardError):
    http_status = 409
    default_message = "A record with this value already exists"


class RelatedRecordMissingError(TaskBoardError):
    http_status = 400
    default_message = "Related record not found"


class StoreFaultError(TaskBoardError):
    http_status = 500
    default_message = "Database error"


def classify_integrity_error(exc: IntegrityError) -> TaskBoardError:
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code == UNIQUE_VIOLATION:
        return ConflictError()
    if code == FOREIGN_KEY_VIOLATION:
        return RelatedRecordMissingError()

    # SQLite has no SQLSTATE, only the message
    message = str(orig if orig is not None else exc).lower()
    if "unique constraint" in message:
        return ConflictError()
    if "foreign key constraint" in message:
        return RelatedRecordMissingError()
    return StoreFaultError()
