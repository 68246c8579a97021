"""
Core validation logic for the configured documents.

Runs every domain loader once and collects a per-domain result instead
of stopping at the first failing document.
"""

from dataclasses import dataclass, field

from simdata.config.settings import SimdataConfig
from simdata.errors import LoadError
from simdata.ingestion.base import DocumentLoader
from simdata.ingestion.emissions import EmissionsLoader
from simdata.ingestion.simulation import SimulationParamsLoader
from simdata.ingestion.sources import source_for
from simdata.ingestion.tariffs import TariffLoader
from simdata.schemas.emissions import EmissionsData
from simdata.schemas.registry import Domain
from simdata.schemas.validator import FieldError
from simdata.utils.logging import get_logger

log = get_logger(__name__)

LOADERS: dict[Domain, type[DocumentLoader]] = {
    Domain.TARIFFS: TariffLoader,
    Domain.EMISSIONS: EmissionsLoader,
    Domain.SIMULATION_PARAMS: SimulationParamsLoader,
}


@dataclass
class ValidationResult:
    """Result of validating a single domain document."""

    domain: Domain
    source: str
    valid: bool
    record_count: int | None
    error_message: str | None = None
    errors: tuple[FieldError, ...] = field(default_factory=tuple)


def _count_records(value: object) -> int:
    """Number of top-level records in a loaded domain value."""
    if isinstance(value, list):
        return len(value)
    if isinstance(value, EmissionsData):
        return len(value.energy_sources) + len(value.conversion_factors)
    return 1


class ValidationRunner:
    """
    Validates the document of every domain.

    Uses the same loaders as application code, so a passing run means
    the loaders will succeed against the configured sources.
    """

    def __init__(self, config: SimdataConfig | None = None) -> None:
        """
        Initialize validation runner.

        Args:
            config: Configuration selecting the document sources.
        """
        self.config = config if config is not None else SimdataConfig()

    def run(self) -> list[ValidationResult]:
        """
        Run validation for all domains.

        Returns:
            List of validation results, one per domain.
        """
        return [self._validate_domain(domain) for domain in Domain]

    def _validate_domain(self, domain: Domain) -> ValidationResult:
        source = source_for(domain, self.config)
        loader = LOADERS[domain](source)

        try:
            value = loader.load()
        except LoadError as e:
            return ValidationResult(
                domain=domain,
                source=source.describe(),
                valid=False,
                record_count=None,
                error_message=str(e),
                errors=e.errors,
            )

        count = _count_records(value)
        log.info("Validation passed", domain=domain.value, records=count)
        return ValidationResult(
            domain=domain,
            source=source.describe(),
            valid=True,
            record_count=count,
        )
