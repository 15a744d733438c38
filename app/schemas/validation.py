"""Tagged validation result over pydantic models.

validate_payload never raises for malformed input: it returns either the
typed value or every failing field. RequestValidationError from FastAPI is
turned into the same FieldError list by field_errors().
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from app.domain.exceptions import ValidationException

M = TypeVar("M", bound=BaseModel)

_REQUEST_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidationResult(Generic[M]):
    """Either ok with a value, or not ok with one FieldError per failing field."""

    ok: bool
    value: M | None = None
    errors: tuple[FieldError, ...] = ()

    @classmethod
    def success(cls, value: M) -> "ValidationResult[M]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, errors: Iterable[FieldError]) -> "ValidationResult[M]":
        return cls(ok=False, errors=tuple(errors))

    def unwrap(self) -> M:
        """Return the value or raise ValidationException listing every field."""
        if self.ok and self.value is not None:
            return self.value
        raise ValidationException(
            "Invalid request body",
            errors=[e.to_dict() for e in self.errors],
        )


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc]
    if parts and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(parts) or "body"


def field_errors(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """Flatten pydantic/FastAPI error dicts into FieldErrors (dotted camelCase paths)."""
    return [FieldError(_field_name(e.get("loc", ())), str(e.get("msg", "Invalid value"))) for e in errors]


def validate_payload(model: type[M], data: Any) -> ValidationResult[M]:
    """Validate untyped input against model; unknown keys are ignored by the model config."""
    try:
        return ValidationResult.success(model.model_validate(data))
    except ValidationError as exc:
        return ValidationResult.failure(field_errors(exc.errors()))
