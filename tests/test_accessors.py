"""Tests for lookup and filter accessors."""

from typing import Any

import pytest

from simdata.errors import LoadError
from simdata.ingestion import (
    InMemoryDocument,
    find_conversion_factor,
    find_conversion_factors_by_context,
    find_energy_source_by_name,
    find_energy_sources_by_type,
    find_tariff_by_name,
    find_tariffs_by_type,
    load_emissions_data,
    load_tariffs,
)
from simdata.schemas import CONVERSION_CONTEXTS, ENERGY_SOURCE_TYPES, TARIFF_TYPES


class TestTariffAccessors:
    """Tests for tariff lookups."""

    def test_find_by_name(self, tariffs_source: InMemoryDocument) -> None:
        """Test finding an existing tariff."""
        tariff = find_tariff_by_name("Tarifa Test Fija", source=tariffs_source)
        assert tariff is not None
        assert tariff.type == "fixed"
        assert tariff.base_price == 3.45

    def test_find_by_name_missing(self, tariffs_source: InMemoryDocument) -> None:
        """Test that an unknown name returns None."""
        assert find_tariff_by_name("NonExistentTariff", source=tariffs_source) is None

    def test_find_by_name_is_exact(self, tariffs_source: InMemoryDocument) -> None:
        """Test that matching is case-sensitive and exact."""
        assert find_tariff_by_name("tarifa test fija", source=tariffs_source) is None
        assert find_tariff_by_name("Tarifa Test", source=tariffs_source) is None

    def test_duplicate_names_first_wins(self, tariffs_document: dict[str, Any]) -> None:
        """Test that with duplicate names the first record in document order wins."""
        duplicate = {**tariffs_document["tariffs"][0], "basePrice": 9.99}
        tariffs_document["tariffs"].append(duplicate)
        tariff = find_tariff_by_name(
            "Tarifa Test Fija", source=InMemoryDocument(tariffs_document)
        )
        assert tariff is not None
        assert tariff.base_price == 3.45

    def test_find_by_type(self, tariffs_source: InMemoryDocument) -> None:
        """Test filtering tariffs by type."""
        variable = find_tariffs_by_type("variable", source=tariffs_source)
        assert [t.name for t in variable] == ["Tarifa Test Variable"]

    def test_find_by_type_empty(self, tariffs_document: dict[str, Any]) -> None:
        """Test that no match yields an empty list, not an error."""
        tariffs_document["tariffs"] = tariffs_document["tariffs"][:1]
        source = InMemoryDocument(tariffs_document)
        assert find_tariffs_by_type("variable", source=source) == []

    def test_types_partition_collection(self, tariffs_source: InMemoryDocument) -> None:
        """Test that per-type subsequences sum to the collection length."""
        total = sum(len(find_tariffs_by_type(t, source=tariffs_source)) for t in TARIFF_TYPES)
        assert total == len(load_tariffs(tariffs_source))

    def test_invalid_source_propagates(self) -> None:
        """Test that accessors do not swallow load failures."""
        with pytest.raises(LoadError):
            find_tariff_by_name("x", source=InMemoryDocument({"tariffs": [{}]}))


class TestBundledTariffs:
    """Tests against the tariffs fixture shipped with the package."""

    def test_tarifa_base(self) -> None:
        """Test the fixed base tariff."""
        tariff = find_tariff_by_name("Tarifa Base")
        assert tariff is not None
        assert tariff.type == "fixed"
        assert tariff.base_price == 3.45
        assert tariff.energy_price == 0.14

    def test_tarifa_industrial(self) -> None:
        """Test the fixed industrial tariff."""
        tariff = find_tariff_by_name("Tarifa Industrial")
        assert tariff is not None
        assert tariff.base_price == 6.75
        assert tariff.energy_price == 0.10

    def test_tarifa_variable_time_ranges(self) -> None:
        """Test the variable tariff and its night band."""
        tariff = find_tariff_by_name("Tarifa Variable")
        assert tariff is not None
        assert tariff.type == "variable"
        assert tariff.time_ranges is not None
        assert len(tariff.time_ranges) == 3
        night = tariff.time_ranges[0]
        assert (night.start_hour, night.end_hour, night.multiplier) == (0, 7, 0.8)

    def test_unknown(self) -> None:
        """Test that an unknown name is absent."""
        assert find_tariff_by_name("Unknown") is None


class TestEnergySourceAccessors:
    """Tests for energy source lookups."""

    def test_find_by_name(self, emissions_source: InMemoryDocument) -> None:
        """Test finding an existing energy source."""
        solar = find_energy_source_by_name("Solar PV", source=emissions_source)
        assert solar is not None
        assert solar.type == "renewable"
        assert solar.lifecycle_emissions == 41

    def test_find_by_name_missing(self, emissions_source: InMemoryDocument) -> None:
        """Test that an unknown name returns None."""
        assert find_energy_source_by_name("NonExistentSource", source=emissions_source) is None

    def test_find_by_type_preserves_order(self, emissions_source: InMemoryDocument) -> None:
        """Test that filtering keeps document order."""
        renewables = find_energy_sources_by_type("renewable", source=emissions_source)
        assert [s.name for s in renewables] == ["Solar PV", "Wind"]

    def test_find_by_type_empty(self, emissions_source: InMemoryDocument) -> None:
        """Test that a type with no sources yields an empty list."""
        assert find_energy_sources_by_type("nuclear", source=emissions_source) == []

    def test_types_partition_collection(self, emissions_source: InMemoryDocument) -> None:
        """Test that per-type subsequences sum to the collection length."""
        total = sum(
            len(find_energy_sources_by_type(t, source=emissions_source))
            for t in ENERGY_SOURCE_TYPES
        )
        assert total == len(load_emissions_data(emissions_source).energy_sources)

    def test_bundled_solar_pv(self) -> None:
        """Test that the bundled fixture contains Solar PV."""
        solar = find_energy_source_by_name("Solar PV")
        assert solar is not None
        assert solar.type == "renewable"


class TestConversionFactorAccessors:
    """Tests for conversion factor lookups."""

    def test_find_factor(self, emissions_source: InMemoryDocument) -> None:
        """Test exact lookup on the composite key."""
        factor = find_conversion_factor("kWh", "MWh", source=emissions_source)
        assert factor is not None
        assert factor.factor == 0.001

    def test_inverse_not_derived(self, emissions_source: InMemoryDocument) -> None:
        """Test that only the stored direction matches."""
        assert find_conversion_factor("MWh", "kWh", source=emissions_source) is None

    def test_partial_key_does_not_match(self, emissions_source: InMemoryDocument) -> None:
        """Test that both units must match."""
        assert find_conversion_factor("kWh", "kgCO2", source=emissions_source) is None

    def test_find_by_context(self, emissions_source: InMemoryDocument) -> None:
        """Test filtering by context."""
        factors = find_conversion_factors_by_context("emissions", source=emissions_source)
        assert [(f.from_unit, f.to_unit) for f in factors] == [("gCO2", "kgCO2")]

    def test_factors_without_context_excluded(
        self, emissions_source: InMemoryDocument
    ) -> None:
        """Test that untagged factors never match a context."""
        matched = [
            f
            for context in CONVERSION_CONTEXTS
            for f in find_conversion_factors_by_context(context, source=emissions_source)
        ]
        assert all(f.context is not None for f in matched)
        assert len(matched) == 2

    def test_find_by_context_empty(self, emissions_source: InMemoryDocument) -> None:
        """Test that a context without factors yields an empty list."""
        assert find_conversion_factors_by_context("power", source=emissions_source) == []

    def test_bundled_kwh_to_mwh(self) -> None:
        """Test the bundled energy conversion."""
        factor = find_conversion_factor("kWh", "MWh")
        assert factor is not None
        assert factor.context == "energy"
