"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

from simdata.ingestion import InMemoryDocument


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def tariffs_document() -> dict[str, Any]:
    """Create a valid tariffs document with one fixed and one variable tariff."""
    return {
        "tariffs": [
            {
                "name": "Tarifa Test Fija",
                "type": "fixed",
                "basePrice": 3.45,
                "energyPrice": 0.14,
                "powerPrice": 44.44,
                "updatedAt": "2024-01-01T00:00:00Z",
            },
            {
                "name": "Tarifa Test Variable",
                "type": "variable",
                "basePrice": 3.45,
                "energyPrice": 0.12,
                "powerPrice": 44.44,
                "timeRanges": [
                    {"startHour": 0, "endHour": 7, "multiplier": 0.8},
                    {"startHour": 8, "endHour": 17, "multiplier": 1.2},
                    {"startHour": 18, "endHour": 23, "multiplier": 1.5},
                ],
                "updatedAt": "2024-01-01T00:00:00Z",
            },
        ]
    }


@pytest.fixture
def emissions_document() -> dict[str, Any]:
    """Create a valid emissions document."""
    return {
        "energySources": [
            {
                "name": "Solar PV",
                "type": "renewable",
                "co2PerKWh": 0,
                "lifecycleEmissions": 41,
                "conversionEfficiency": 20,
                "updatedAt": "2024-01-01T00:00:00Z",
            },
            {
                "name": "Coal",
                "type": "fossil",
                "co2PerKWh": 820,
                "lifecycleEmissions": 820,
                "conversionEfficiency": 37,
                "updatedAt": "2024-01-01T00:00:00Z",
            },
            {
                "name": "Wind",
                "type": "renewable",
                "co2PerKWh": 0,
                "lifecycleEmissions": 11,
                "conversionEfficiency": 45,
                "updatedAt": "2024-01-01T00:00:00Z",
            },
        ],
        "conversionFactors": [
            {"fromUnit": "kWh", "toUnit": "MWh", "factor": 0.001, "context": "energy"},
            {"fromUnit": "gCO2", "toUnit": "kgCO2", "factor": 0.001, "context": "emissions"},
            {"fromUnit": "kWh", "toUnit": "MJ", "factor": 3.6, "notes": "No losses"},
        ],
    }


@pytest.fixture
def simulation_params_document() -> dict[str, Any]:
    """Create a valid simulation parameters document including optional fields."""
    return {
        "initialInvestment": 10000,
        "systemLifespan": 25,
        "maintenanceCost": 100,
        "annualDegradation": 0.5,
        "energyPriceInflation": 2,
        "financingRate": 5,
        "financingYears": 10,
        "taxRate": 21,
        "incentives": [
            {
                "name": "Solar Tax Credit",
                "type": "taxCredit",
                "amount": 3000,
                "maxLimit": 5000,
                "expirationDate": "2025-12-31T23:59:59Z",
            }
        ],
        "updatedAt": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def tariffs_source(tariffs_document: dict[str, Any]) -> InMemoryDocument:
    """In-memory source serving the valid tariffs document."""
    return InMemoryDocument(tariffs_document, name="tariffs")


@pytest.fixture
def emissions_source(emissions_document: dict[str, Any]) -> InMemoryDocument:
    """In-memory source serving the valid emissions document."""
    return InMemoryDocument(emissions_document, name="emissions")


@pytest.fixture
def simulation_params_source(
    simulation_params_document: dict[str, Any],
) -> InMemoryDocument:
    """In-memory source serving the valid simulation parameters document."""
    return InMemoryDocument(simulation_params_document, name="simulation_params")


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON document into tmp_path and return its path."""

    def _write(name: str, document: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
