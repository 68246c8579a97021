"""
Typed configuration models using Pydantic.

Every setting has a default, so an empty configuration reads the
fixtures bundled with the package.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from simdata.schemas.registry import Domain

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SourcesConfig(BaseModel):
    """Document source overrides.

    Paths are relative to data_root. A domain without an override is read
    from the fixture bundled in ``simdata/data``.
    """

    model_config = ConfigDict(frozen=True)

    data_root: Path = Field(
        default=Path("."), description="Root directory for override documents"
    )
    tariffs: Path | None = Field(default=None, description="Tariffs JSON document")
    emissions: Path | None = Field(default=None, description="Emissions JSON document")
    simulation_params: Path | None = Field(
        default=None, description="Simulation parameters JSON document"
    )

    def resolve(self, domain: Domain) -> Path | None:
        """Resolve the override path for a domain against data_root."""
        rel_path: Path | None = getattr(self, domain.value)
        if rel_path is None:
            return None
        return self.data_root / rel_path


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="WARNING", description="Minimum log level")
    json_output: bool = Field(default=False, description="Render log events as JSON")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            msg = f"Log level must be one of {', '.join(LOG_LEVELS)}, got: {v!r}"
            raise ValueError(msg)
        return level


class SimdataConfig(BaseModel):
    """Complete configuration."""

    model_config = ConfigDict(frozen=True)

    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
