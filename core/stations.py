# =============================================================================
# core/stations.py  -  Query Operations over the Station Catalog
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   The three read-only questions a client can ask about the catalog:
#
#     find_stations_on_route   every station, cheapest first for a fuel type
#     get_best_offers          stations running a promotion, catalog order
#     get_cheapest_stations    the N cheapest stations for a fuel type
#
#   Each takes already-validated arguments (see core/schemas.py) and returns
#   a plain JSON-ready dict.  No I/O, no randomness, no hidden state: the same
#   catalog and arguments always give the same payload.
#
# ORDERING:
#   sorted() is stable and returns a new list, so equal-priced stations keep
#   their catalog order and the catalog tuple itself is never reordered.
#
# ROUTES ARE NOT FILTERS:
#   origin/destination/route are echoed back, never used to select stations.
#   Distances in the dataset are pre-computed and passed through untouched.
# =============================================================================

from typing import Optional, Sequence

from core.models import DEFAULT_FUEL_TYPE, Station

ROUTE_ARROW = "→"
DEFAULT_CHEAPEST_LIMIT = 3


def sort_by_price(catalog: Sequence[Station], fuel_type: str) -> list[Station]:
    """Return a new list of stations ordered by ascending price (stable)."""
    return sorted(catalog, key=lambda station: station.price(fuel_type))


def find_stations_on_route(
    catalog: Sequence[Station],
    origin: str,
    destination: str,
    fuel_type: str = DEFAULT_FUEL_TYPE,
) -> dict:
    """List every station, cheapest first for ``fuel_type``.

    Args:
        catalog: The station catalog.
        origin: Route start, echoed in the "route" label.
        destination: Route end, echoed in the "route" label.
        fuel_type: Fuel whose price decides the order.

    Returns:
        {"route": "A Coruña → Madrid", "stations": [...], "totalStations": n}
    """
    stations = sort_by_price(catalog, fuel_type)
    return {
        "route": f"{origin} {ROUTE_ARROW} {destination}",
        "stations": [s.to_dict() for s in stations],
        "totalStations": len(stations),
    }


def get_best_offers(catalog: Sequence[Station], route: Optional[str] = None) -> dict:
    """List stations that have at least one active offer, in catalog order.

    ``route`` is accepted for interface compatibility and does not filter.
    A total of 0 is a normal answer, not an error.
    """
    with_offers = [s for s in catalog if s.has_offers]
    return {
        "stationsWithOffers": [s.to_dict() for s in with_offers],
        "total": len(with_offers),
    }


def get_cheapest_stations(
    catalog: Sequence[Station],
    fuel_type: str,
    limit: int = DEFAULT_CHEAPEST_LIMIT,
) -> dict:
    """Return the ``limit`` cheapest stations for ``fuel_type``.

    A limit beyond the catalog size returns the whole ordered catalog, and a
    limit of 0 returns an empty list.  ``lowestPrice`` is None when there is
    nothing to price, so "no data" never reads as a price of 0.
    """
    cheapest = sort_by_price(catalog, fuel_type)[:limit]
    return {
        "fuelType": fuel_type,
        "cheapestStations": [s.to_dict() for s in cheapest],
        "lowestPrice": cheapest[0].price(fuel_type) if cheapest else None,
    }
