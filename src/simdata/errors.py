"""
Error types raised by the data-access layer.

Lookup misses are not errors: accessors return ``None`` for an unknown key.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from simdata.schemas.validator import FieldError


class SimdataError(Exception):
    """Base class for all simdata errors."""


class SourceError(SimdataError):
    """The raw document could not be read or is not valid JSON."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read {source}: {reason}")


class LoadError(SimdataError):
    """
    A load-and-validate cycle failed.

    Attributes:
        domain: Domain whose loader failed (tariffs, emissions, simulation_params).
        errors: Field errors reported by the validator. Empty when the
            failure came from the source itself.
    """

    def __init__(
        self,
        domain: str,
        message: str,
        errors: "tuple[FieldError, ...]" = (),
    ) -> None:
        self.domain = domain
        self.errors = errors
        super().__init__(message)
