# =============================================================================
# core/presentation.py  -  Plain-text rendering of tool results
# =============================================================================
#
# Turns the JSON payloads from core/stations.py into terminal-friendly
# "station cards".  Used by `main.py --tool ...`; the MCP server itself
# always returns raw JSON.
#
# Works on payload dicts (not Station objects) so it can render anything
# that came back over the wire.
# =============================================================================

from typing import Optional

from core.models import FUEL_TYPES
from core.registry import ToolName

_AMENITY_ICONS = {
    "Shop": "🛒",
    "Coffee": "☕",
    "Restrooms": "🚻",
    "Car wash": "🚿",
    "Rest area": "🅿️",
}
DEFAULT_AMENITY_ICON = "✓"

_FUEL_LABELS = {
    "unleaded95": "Unleaded 95",
    "unleaded98": "Unleaded 98",
    "diesel": "Diesel",
}

NO_OFFERS_MESSAGE = "No stations with active offers found."
NO_PRICE_MESSAGE = "No price data available."


def amenity_icon(amenity: str) -> str:
    return _AMENITY_ICONS.get(amenity, DEFAULT_AMENITY_ICON)


def fuel_label(fuel_type: str) -> str:
    """'unleaded95' -> 'Unleaded 95', 'diesel' -> 'Diesel'."""
    return _FUEL_LABELS.get(fuel_type, fuel_type)


def format_price(price: float) -> str:
    return f"€{price:.3f}"


def format_station_card(station: dict, highlight: Optional[str] = None) -> str:
    """Render one station as a block of text.

    ``highlight`` marks one fuel type's price with an asterisk (used to point
    at the fuel the user asked about).
    """
    location = station["location"]
    lines = [
        f"⛽ {station['name']}  ({station['distanceFromOrigin']} km)",
        f"   {location['city']} - {location['address']}",
    ]

    prices = station["prices"]
    price_parts = []
    for fuel_type in FUEL_TYPES:
        if fuel_type not in prices:
            continue
        marker = " *" if fuel_type == highlight else ""
        price_parts.append(f"{fuel_label(fuel_type)}: {format_price(prices[fuel_type])}{marker}")
    lines.append("   " + " | ".join(price_parts))

    for offer in station["offers"]:
        lines.append(f"   🎁 {offer['type'].upper()}: {offer['description']}")

    if station["amenities"]:
        lines.append("   " + "  ".join(f"{amenity_icon(a)} {a}" for a in station["amenities"]))

    return "\n".join(lines)


def format_tool_result(tool_name: str, payload: dict) -> str:
    """Render a whole tool payload: a header line or two, then the cards."""
    tool = ToolName(tool_name)
    if tool is ToolName.FIND_STATIONS_ON_ROUTE:
        header = [f"Route: {payload['route']}", f"Found {payload['totalStations']} stations"]
        cards = [format_station_card(s) for s in payload["stations"]]
    elif tool is ToolName.GET_BEST_OFFERS:
        if payload["total"] == 0:
            return NO_OFFERS_MESSAGE
        header = [f"Found {payload['total']} stations with offers"]
        cards = [format_station_card(s) for s in payload["stationsWithOffers"]]
    else:
        fuel_type = payload["fuelType"]
        lowest = payload["lowestPrice"]
        header = [f"Cheapest {fuel_label(fuel_type)} prices"]
        header.append(NO_PRICE_MESSAGE if lowest is None else f"Lowest price: {format_price(lowest)}/L")
        cards = [format_station_card(s, highlight=fuel_type) for s in payload["cheapestStations"]]

    return "\n\n".join(["\n".join(header), *cards])
