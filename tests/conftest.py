"""Shared fixtures for the fuel station tests."""

import pytest

from core.catalog import Catalog, load_catalog, parse_catalog, set_catalog
from core.settings import DEFAULT_DATA_PATH
from tests.factories import station_record


@pytest.fixture(autouse=True)
def reset_process_catalog():
    """Each test starts and ends without a cached process-wide catalog."""
    set_catalog(None)
    yield
    set_catalog(None)


@pytest.fixture
def three_station_catalog() -> Catalog:
    """Diesel prices [1.499, 1.450, 1.520], in that catalog order."""
    return parse_catalog(
        {
            "stations": [
                station_record("Alpha", diesel=1.499),
                station_record(
                    "Bravo",
                    diesel=1.450,
                    offers=[{"type": "discount", "description": "5 cents off"}],
                    amenities=["Shop", "Coffee"],
                ),
                station_record("Charlie", diesel=1.520),
            ]
        }
    )


@pytest.fixture
def tied_catalog() -> Catalog:
    """Several equal diesel prices interleaved with other prices."""
    return parse_catalog(
        [
            station_record("First 1.50", diesel=1.500, unleaded95=1.700),
            station_record("Cheap 1.40", diesel=1.400, unleaded95=1.700),
            station_record("Second 1.50", diesel=1.500, unleaded95=1.600),
            station_record("Third 1.50", diesel=1.500, unleaded95=1.700),
            station_record("Cheap again 1.40", diesel=1.400, unleaded95=1.550),
        ]
    )


@pytest.fixture
def bundled_catalog() -> Catalog:
    return load_catalog(DEFAULT_DATA_PATH)


@pytest.fixture
def empty_catalog() -> Catalog:
    return parse_catalog({"stations": []})
