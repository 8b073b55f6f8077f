"""Shared schema configuration."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        validate_default=True,
    )

    def changes(self) -> dict:
        """Fields sent in a partial update, with nulls dropped."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class SuccessResponse(CamelModel):
    success: bool = True
