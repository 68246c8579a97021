"""
Base class for document loaders.

Provides the read, validate and fail-loudly cycle shared by all domains.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from simdata.errors import LoadError, SourceError
from simdata.ingestion.sources import DocumentSource, packaged_source
from simdata.schemas.base import DocumentModel
from simdata.schemas.registry import Domain, SchemaRegistry
from simdata.schemas.validator import ValidationFailure, validate_document
from simdata.utils.logging import get_logger

log = get_logger(__name__)

M = TypeVar("M", bound=DocumentModel)
T = TypeVar("T")


class DocumentLoader(ABC, Generic[M, T]):
    """
    Abstract base class for document loaders.

    Every call to load() reads the source and validates it again; nothing
    is cached between calls. A document with any invalid field is rejected
    as a whole.
    """

    domain: ClassVar[Domain]

    def __init__(self, source: DocumentSource | None = None) -> None:
        """
        Initialize document loader.

        Args:
            source: Raw document provider. Defaults to the packaged fixture.
        """
        self.source = source if source is not None else packaged_source(self.domain)
        info = SchemaRegistry.get_info(self.domain)
        self.schema: type[M] = info.schema  # type: ignore[assignment]
        self.label = info.label

    @abstractmethod
    def _extract(self, document: M) -> T:
        """Select the value handed to callers from the validated document."""
        ...

    def load(self) -> T:
        """
        Read and validate the document.

        Returns:
            The validated, typed domain value.

        Raises:
            LoadError: If the source cannot be read or the document is invalid.
        """
        origin = self.source.describe()
        log.debug("Loading document", domain=self.domain.value, source=origin)

        try:
            raw = self.source.read()
        except SourceError as e:
            msg = f"Failed to load {self.label.lower()} data: {e}"
            log.error("Document source unavailable", domain=self.domain.value, error=str(e))
            raise LoadError(self.domain.value, msg) from e

        outcome = validate_document(self.schema, raw)
        if isinstance(outcome, ValidationFailure):
            raise self._validation_error(outcome, origin)

        log.debug("Schema validation passed", domain=self.domain.value, source=origin)
        return self._extract(outcome.data)

    def _validation_error(self, failure: ValidationFailure, origin: str) -> LoadError:
        """Log the diagnostic record and build the error to raise."""
        msg = f"{self.label} data validation failed: {failure.summary()}"
        log.error(
            "Schema validation failed",
            domain=self.domain.value,
            source=origin,
            n_errors=len(failure.errors),
            errors=[str(error) for error in failure.errors],
        )
        return LoadError(self.domain.value, msg, failure.errors)
