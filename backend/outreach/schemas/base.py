from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DeleteResponse(BaseModel):
    success: bool = True
    id: str


class SuccessResponse(BaseModel):
    success: bool = True


def to_document(value):
    """Convert schema values to the camelCase JSON stored in document columns."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, list):
        return [to_document(v) for v in value]
    return value
