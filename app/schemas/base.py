"""Shared pydantic building blocks: camelCase wire format and URL fields."""

from typing import Annotated, ClassVar

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

_URL = TypeAdapter(AnyUrl)


def _validate_url(value: str) -> str:
    """Accept absolute URLs only; keep the caller's string as stored."""
    try:
        _URL.validate_python(value)
    except ValidationError:
        raise ValueError("must be a valid URL") from None
    return value


UrlStr = Annotated[str, AfterValidator(_validate_url)]


class CamelModel(BaseModel):
    """Request body: camelCase keys on the wire, unknown keys ignored.

    clearable_fields names the optional fields an update may set to null.
    """

    clearable_fields: ClassVar[frozenset[str]] = frozenset()

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_create_dict(self) -> dict:
        """Document fields for a create (aliases, absent optionals dropped)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_update_dict(self) -> dict:
        """Document fields for a partial update.

        Only supplied fields are written. A null clears a clearable field and
        is ignored for any other field.
        """
        skip = {
            name
            for name in type(self).model_fields
            if name not in self.model_fields_set
            or (getattr(self, name) is None and name not in self.clearable_fields)
        }
        return self.model_dump(mode="json", by_alias=True, exclude=skip)


class CamelResponse(BaseModel):
    """Response body built from an application DTO."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    message: str
