"""
Shared building blocks for the document schemas.

Documents use camelCase JSON keys; models expose snake_case attributes and
carry the JSON key as the field alias.
"""

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic_core import PydanticCustomError

# Full date and time in UTC, seconds and fraction optional
_ISO_DATETIME = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2})(?::(\d{2})(?:\.\d+)?)?Z$"
)


def _check_iso_datetime(value: str) -> str:
    """Accept ISO 8601 UTC timestamps such as ``2024-01-01T00:00:00Z``."""
    match = _ISO_DATETIME.match(value)
    if match is None:
        raise PydanticCustomError(
            "datetime_format",
            "Invalid datetime, expected ISO 8601 UTC timestamp like "
            "2024-01-01T00:00:00Z, got '{value}'",
            {"value": value},
        )
    year, month, day, hour, minute, second = match.groups()
    try:
        datetime(
            int(year), int(month), int(day), int(hour), int(minute), int(second or 0)
        )
    except ValueError as e:
        raise PydanticCustomError(
            "datetime_format",
            "Invalid datetime '{value}': {reason}",
            {"value": value, "reason": str(e)},
        ) from e
    return value


# Kept as the original string so validated documents dump back unchanged
IsoDateTime = Annotated[str, AfterValidator(_check_iso_datetime)]


def _reject_null(value: Any) -> Any:
    if value is None:
        raise PydanticCustomError("null_type", "Optional field may be omitted but not null")
    return value


def _integral_float_to_int(value: Any) -> Any:
    # JSON numbers parse to float even when written as 25.0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# Optional fields: the default applies when the key is absent, an explicit null fails
NotNull = BeforeValidator(_reject_null)

WholeNumber = Annotated[int, BeforeValidator(_integral_float_to_int)]


class DocumentModel(BaseModel):
    """Base model for records read from JSON documents."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    def to_document(self) -> dict[str, Any]:
        """
        Dump the record back to its JSON document shape.

        Keys use the document aliases and optional fields that were absent
        from the input stay absent.
        """
        return self.model_dump(by_alias=True, exclude_unset=True)
