# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of a station record as it lives in
# memory.  They are frozen: the catalog is loaded once and never mutated, so
# a record handed to one request can't be changed under another.
#
# WIRE SHAPE:
#   Python attributes are snake_case; the JSON the tools return keeps the
#   dataset's camelCase keys (distanceFromOrigin).  Station.to_dict() is the
#   single place that translation happens.
# =============================================================================

import math
from dataclasses import dataclass, field
from typing import Literal, Mapping, get_args

from core.errors import DataIntegrityError


# -----------------------------------------------------------------------------
# Fuel types
# -----------------------------------------------------------------------------
# The only three keys a station's price map may (and must) contain.  The
# order here is also the order prices are rendered in.
# -----------------------------------------------------------------------------
FuelType = Literal["unleaded95", "unleaded98", "diesel"]
FUEL_TYPES: tuple[str, ...] = get_args(FuelType)
DEFAULT_FUEL_TYPE: FuelType = "diesel"


@dataclass(frozen=True)
class Location:
    city: str
    address: str


@dataclass(frozen=True)
class Offer:
    """One active promotion, e.g. type="discount", "5 cents off per litre"."""

    type: str
    description: str


@dataclass(frozen=True)
class Station:
    """A single fuel station in the catalog."""

    name: str
    location: Location
    distance_from_origin: float        # Opaque, pre-computed km; never derived here
    prices: Mapping[str, float]        # FuelType -> price per litre (EUR), read-only
    offers: tuple[Offer, ...] = field(default_factory=tuple)
    amenities: tuple[str, ...] = field(default_factory=tuple)

    def price(self, fuel_type: str) -> float:
        """Return the price for ``fuel_type``.

        Raises DataIntegrityError instead of guessing when the price is
        missing or not a finite non-negative number.
        """
        if fuel_type not in self.prices:
            raise DataIntegrityError(self.name, f"prices.{fuel_type}", "is missing")
        value = self.prices[fuel_type]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataIntegrityError(self.name, f"prices.{fuel_type}", f"is not a number: {value!r}")
        if not math.isfinite(value) or value < 0:
            raise DataIntegrityError(self.name, f"prices.{fuel_type}", f"must be finite and >= 0, got {value!r}")
        return value

    @property
    def has_offers(self) -> bool:
        return len(self.offers) > 0

    def to_dict(self) -> dict:
        """Serialize to the JSON shape the tools return."""
        return {
            "name": self.name,
            "location": {"city": self.location.city, "address": self.location.address},
            "distanceFromOrigin": self.distance_from_origin,
            "prices": {fuel: self.prices[fuel] for fuel in FUEL_TYPES if fuel in self.prices},
            "offers": [{"type": o.type, "description": o.description} for o in self.offers],
            "amenities": list(self.amenities),
        }
