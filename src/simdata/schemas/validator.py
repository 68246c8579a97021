"""
Generic document validator.

Runs an untyped document through a schema and returns a discriminated
result instead of raising, so callers decide how a failure surfaces.
"""

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from simdata.schemas.base import DocumentModel

M = TypeVar("M", bound=DocumentModel)

ROOT_PATH = "<root>"

ErrorKind = Literal["type", "range", "enum", "required", "format", "other"]

_RANGE_ERRORS = frozenset(
    {"greater_than", "greater_than_equal", "less_than", "less_than_equal", "finite_number"}
)


@dataclass(frozen=True)
class FieldError:
    """A single validation problem located by its dotted document path."""

    path: str
    message: str
    kind: ErrorKind

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(frozen=True)
class ValidationSuccess(Generic[M]):
    """Document conforms to the schema."""

    data: M

    @property
    def valid(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class ValidationFailure:
    """Document violates the schema; errors are in document order."""

    errors: tuple[FieldError, ...]

    @property
    def valid(self) -> Literal[False]:
        return False

    def summary(self) -> str:
        """Render all errors on one line."""
        return "; ".join(str(error) for error in self.errors)


ValidationOutcome = ValidationSuccess[M] | ValidationFailure


def _json_type_name(value: Any) -> str:
    """Name a Python value by its JSON type."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _classify(error_type: str) -> ErrorKind:
    if error_type == "missing":
        return "required"
    if error_type in _RANGE_ERRORS:
        return "range"
    if error_type in {"literal_error", "enum"}:
        return "enum"
    if error_type == "datetime_format":
        return "format"
    if error_type.endswith(("_type", "_parsing")) or error_type == "int_from_float":
        return "type"
    return "other"


def _format_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) if loc else ROOT_PATH


def to_field_error(details: ErrorDetails) -> FieldError:
    """Convert one pydantic error entry into a FieldError."""
    kind = _classify(details["type"])
    message = details["msg"]
    if kind == "type":
        message = f"{message}, received {_json_type_name(details.get('input'))}"
    return FieldError(path=_format_path(details["loc"]), message=message, kind=kind)


def validate_document(schema: type[M], raw: Any) -> ValidationOutcome[M]:
    """
    Validate an untyped document against a schema.

    Every detectable error is reported. Errors are ordered outer to inner
    in field declaration order, so the first entry is deterministic.

    Args:
        schema: Document model to validate against.
        raw: Untyped document, typically the result of ``json.load``.

    Returns:
        ValidationSuccess with the typed record, or ValidationFailure
        with the ordered field errors.
    """
    try:
        data = schema.model_validate(raw)
    except ValidationError as e:
        errors = tuple(to_field_error(details) for details in e.errors())
        return ValidationFailure(errors=errors)
    return ValidationSuccess(data=data)
