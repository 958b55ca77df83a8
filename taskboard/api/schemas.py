from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorOut(BaseModel):
    error: str


class FieldErrorOut(BaseModel):
    field: str
    message: str
    type: str


class ValidationErrorOut(ErrorOut):
    details: list[FieldErrorOut]


def reject_null(value):
    # Used on optional update fields whose column is NOT NULL
    if value is None:
        raise ValueError("may be omitted but not null")
    return value


NOT_FOUND = {404: {"model": ErrorOut}}
BAD_REQUEST = {400: {"model": ValidationErrorOut}}
