"""Simulation parameter ingestion."""

from simdata.ingestion.base import DocumentLoader
from simdata.ingestion.sources import DocumentSource
from simdata.schemas.registry import Domain
from simdata.schemas.simulation import SimulationParams


class SimulationParamsLoader(DocumentLoader[SimulationParams, SimulationParams]):
    """Loader for the simulation parameters singleton."""

    domain = Domain.SIMULATION_PARAMS

    def _extract(self, document: SimulationParams) -> SimulationParams:
        return document


def load_simulation_params(source: DocumentSource | None = None) -> SimulationParams:
    """
    Convenience function to load the simulation parameters.

    Args:
        source: Raw document provider. Defaults to the packaged fixture.

    Returns:
        Validated simulation parameters.
    """
    return SimulationParamsLoader(source).load()
