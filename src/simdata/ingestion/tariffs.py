"""
Tariff data ingestion.

Loads the tariffs document and offers lookups by name and type.
"""

from simdata.ingestion.base import DocumentLoader
from simdata.ingestion.sources import DocumentSource
from simdata.schemas.registry import Domain
from simdata.schemas.tariff import Tariff, TariffCollection, TariffType


class TariffLoader(DocumentLoader[TariffCollection, list[Tariff]]):
    """Loader for the tariffs document; yields the inner tariff list."""

    domain = Domain.TARIFFS

    def _extract(self, document: TariffCollection) -> list[Tariff]:
        return list(document.tariffs)


def load_tariffs(source: DocumentSource | None = None) -> list[Tariff]:
    """
    Convenience function to load all tariffs.

    Args:
        source: Raw document provider. Defaults to the packaged fixture.

    Returns:
        Validated tariffs in document order.
    """
    return TariffLoader(source).load()


def find_tariff_by_name(name: str, source: DocumentSource | None = None) -> Tariff | None:
    """Return the first tariff whose name equals ``name``, or None."""
    return next((tariff for tariff in load_tariffs(source) if tariff.name == name), None)


def find_tariffs_by_type(
    tariff_type: TariffType, source: DocumentSource | None = None
) -> list[Tariff]:
    """Return all tariffs of the given type, preserving document order."""
    return [tariff for tariff in load_tariffs(source) if tariff.type == tariff_type]
