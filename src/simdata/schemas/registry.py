"""
Schema registry for versioning and discovery.

Maps each domain to the schema that validates its whole document.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from simdata.schemas.base import DocumentModel
from simdata.schemas.emissions import EmissionsData
from simdata.schemas.simulation import SimulationParams
from simdata.schemas.tariff import TariffCollection
from simdata.schemas.validator import ValidationOutcome, validate_document


class Domain(str, Enum):
    """Independent data domains, each with its own schema, loader and accessors."""

    TARIFFS = "tariffs"
    EMISSIONS = "emissions"
    SIMULATION_PARAMS = "simulation_params"


@dataclass(frozen=True)
class SchemaInfo:
    """Metadata about a registered schema."""

    domain: Domain
    schema: type[DocumentModel]
    version: str
    label: str
    description: str


class SchemaRegistry:
    """
    Centralized registry for all document schemas.

    Provides version tracking and schema discovery.
    """

    _version = "1.0.0"

    _schemas: ClassVar[dict[str, SchemaInfo]] = {
        Domain.TARIFFS.value: SchemaInfo(
            domain=Domain.TARIFFS,
            schema=TariffCollection,
            version="1.0.0",
            label="Tariff",
            description="Electricity tariffs with optional hourly price bands",
        ),
        Domain.EMISSIONS.value: SchemaInfo(
            domain=Domain.EMISSIONS,
            schema=EmissionsData,
            version="1.0.0",
            label="Emissions",
            description="Energy source emission factors and unit conversions",
        ),
        Domain.SIMULATION_PARAMS.value: SchemaInfo(
            domain=Domain.SIMULATION_PARAMS,
            schema=SimulationParams,
            version="1.0.0",
            label="Simulation parameters",
            description="Investment, financing and incentive parameters",
        ),
    }

    @classmethod
    def registry_version(cls) -> str:
        """Get the registry version."""
        return cls._version

    @classmethod
    def get(cls, name: str | Domain) -> type[DocumentModel]:
        """
        Get a schema by domain name.

        Args:
            name: Domain name or Domain member.

        Returns:
            The document model class.

        Raises:
            KeyError: If schema not found.
        """
        return cls.get_info(name).schema

    @classmethod
    def get_info(cls, name: str | Domain) -> SchemaInfo:
        """
        Get full schema info by domain name.

        Args:
            name: Domain name or Domain member.

        Returns:
            SchemaInfo with metadata.
        """
        key = name.value if isinstance(name, Domain) else name
        if key not in cls._schemas:
            available = ", ".join(cls._schemas.keys())
            msg = f"Unknown schema '{key}'. Available: {available}"
            raise KeyError(msg)
        return cls._schemas[key]

    @classmethod
    def list_schemas(cls) -> list[str]:
        """List all registered schema names."""
        return list(cls._schemas.keys())

    @classmethod
    def validate(cls, raw: Any, schema_name: str | Domain) -> ValidationOutcome[Any]:
        """
        Validate a raw document against a registered schema.

        Args:
            raw: Untyped document.
            schema_name: Name of schema to validate against.

        Returns:
            Validation outcome, never raises for invalid documents.
        """
        return validate_document(cls.get(schema_name), raw)
