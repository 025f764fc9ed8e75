# =============================================================================
# core/catalog.py  -  Station Catalog loading & validation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the stations JSON file into an immutable tuple of Station records,
#   checking every record on the way in.  A catalog that loads is a catalog
#   the query operations can trust: all three fuel prices present, finite and
#   non-negative; offers and amenities present (possibly empty).
#
# LIFECYCLE:
#   get_catalog() loads once per process and caches the result.  There is no
#   teardown: the catalog holds no external resource, just memory.
#
# ACCEPTED FILE SHAPES:
#   {"stations": [ {...}, ... ]}     (what the bundled dataset uses)
#   [ {...}, ... ]                   (bare list)
# =============================================================================

import json
import logging
import math
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, Union

from core.errors import DataIntegrityError
from core.models import FUEL_TYPES, Location, Offer, Station
from core.settings import stations_data_path

logger = logging.getLogger(__name__)

Catalog = tuple[Station, ...]

_catalog: Optional[Catalog] = None
_catalog_lock = threading.Lock()


def _require(record: dict, key: str, station: Optional[str]) -> Any:
    if key not in record or record[key] is None:
        raise DataIntegrityError(station, key, "is missing")
    return record[key]


def _require_str(record: dict, key: str, station: Optional[str]) -> str:
    value = _require(record, key, station)
    if not isinstance(value, str):
        raise DataIntegrityError(station, key, f"must be a string, got {type(value).__name__}")
    return value


def parse_station(record: Any) -> Station:
    """Validate one raw JSON record and build a Station from it."""
    if not isinstance(record, dict):
        raise DataIntegrityError(None, "station", f"must be an object, got {type(record).__name__}")

    name = _require_str(record, "name", None)

    location = _require(record, "location", name)
    if not isinstance(location, dict):
        raise DataIntegrityError(name, "location", "must be an object")

    distance = _require(record, "distanceFromOrigin", name)
    if isinstance(distance, bool) or not isinstance(distance, (int, float)):
        raise DataIntegrityError(name, "distanceFromOrigin", f"must be a number, got {distance!r}")
    if not math.isfinite(distance):
        raise DataIntegrityError(name, "distanceFromOrigin", "must be finite")

    prices = _require(record, "prices", name)
    if not isinstance(prices, dict):
        raise DataIntegrityError(name, "prices", "must be an object")

    offers = _require(record, "offers", name)
    if not isinstance(offers, list):
        raise DataIntegrityError(name, "offers", "must be a list")
    for i, offer in enumerate(offers):
        if not isinstance(offer, dict):
            raise DataIntegrityError(name, f"offers[{i}]", "must be an object")

    amenities = _require(record, "amenities", name)
    if not isinstance(amenities, list) or not all(isinstance(a, str) for a in amenities):
        raise DataIntegrityError(name, "amenities", "must be a list of strings")

    station = Station(
        name=name,
        location=Location(
            city=_require_str(location, "city", name),
            address=_require_str(location, "address", name),
        ),
        distance_from_origin=distance,
        prices=MappingProxyType(dict(prices)),
        offers=tuple(
            Offer(
                type=_require_str(offer, "type", name),
                description=_require_str(offer, "description", name),
            )
            for offer in offers
        ),
        amenities=tuple(amenities),
    )

    # Touch every fuel price so a bad record fails here, at load, and not in
    # the middle of some later request.
    for fuel_type in FUEL_TYPES:
        station.price(fuel_type)

    return station


def parse_catalog(document: Any) -> Catalog:
    """Build a Catalog from an already-decoded JSON document."""
    if isinstance(document, dict):
        records = document.get("stations")
    else:
        records = document
    if not isinstance(records, list):
        raise DataIntegrityError(None, "stations", "must be a list of station records")
    return tuple(parse_station(record) for record in records)


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Read and validate a stations JSON file.

    OSError and json.JSONDecodeError propagate unchanged; malformed records
    raise DataIntegrityError.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        document = json.load(fh)
    catalog = parse_catalog(document)
    logger.info("Loaded %d stations from %s", len(catalog), path)
    return catalog


def get_catalog() -> Catalog:
    """Return the process-wide catalog, loading it on first use."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = load_catalog(stations_data_path())
    return _catalog


def set_catalog(catalog: Optional[Catalog]) -> None:
    """Install (or with None, forget) the process-wide catalog."""
    global _catalog
    with _catalog_lock:
        _catalog = tuple(catalog) if catalog is not None else None
