# =============================================================================
# core/registry.py  -  Tool Registry & dispatch
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps a tool name to (description, argument schema, handler) and is the one
#   place a call gets routed:
#
#     dispatch(name, args)
#       1. name  -> ToolSpec            (unknown -> UnknownTool)
#       2. args  -> validated model      (schema violation -> InvalidArgs)
#       3. model -> handler(catalog, model) -> payload, returned unchanged
#
#   Validation finishes before the handler runs, so a bad call never does
#   partial work.  Adding a tool means adding a ToolName member and one
#   REGISTRY entry; nothing else branches on tool names.
# =============================================================================

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence

from pydantic import BaseModel, ValidationError

from core import stations
from core.catalog import get_catalog
from core.errors import InvalidArgs, UnknownTool
from core.models import Station
from core.schemas import BestOffersArgs, CheapestStationsArgs, FindStationsArgs

logger = logging.getLogger(__name__)


class ToolName(str, Enum):
    FIND_STATIONS_ON_ROUTE = "find_stations_on_route"
    GET_BEST_OFFERS = "get_best_offers"
    GET_CHEAPEST_STATIONS = "get_cheapest_stations"


Handler = Callable[[Sequence[Station], Any], dict]


@dataclass(frozen=True)
class ToolSpec:
    name: ToolName
    description: str
    args_model: type[BaseModel]
    handler: Handler

    def input_schema(self) -> dict:
        """JSON schema for this tool's arguments, as advertised to clients."""
        return self.args_model.model_json_schema(by_alias=True)

    def validate(self, args: Optional[Mapping[str, Any]]) -> BaseModel:
        try:
            return self.args_model.model_validate({} if args is None else args)
        except ValidationError as exc:
            raise _invalid_args(self.name.value, exc) from exc


def _invalid_args(tool: str, exc: ValidationError) -> InvalidArgs:
    # Report the first violation; clients fix one field at a time anyway.
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "arguments"
    return InvalidArgs(tool, field, error["type"], error["msg"])


REGISTRY: dict[ToolName, ToolSpec] = {
    ToolName.FIND_STATIONS_ON_ROUTE: ToolSpec(
        name=ToolName.FIND_STATIONS_ON_ROUTE,
        description="Find Shell gas stations along a route between two cities, cheapest first",
        args_model=FindStationsArgs,
        handler=lambda catalog, a: stations.find_stations_on_route(
            catalog, a.origin, a.destination, a.fuel_type
        ),
    ),
    ToolName.GET_BEST_OFFERS: ToolSpec(
        name=ToolName.GET_BEST_OFFERS,
        description="Get gas stations with active offers and promotions",
        args_model=BestOffersArgs,
        handler=lambda catalog, a: stations.get_best_offers(catalog, a.route),
    ),
    ToolName.GET_CHEAPEST_STATIONS: ToolSpec(
        name=ToolName.GET_CHEAPEST_STATIONS,
        description="Get the cheapest gas stations sorted by fuel price",
        args_model=CheapestStationsArgs,
        handler=lambda catalog, a: stations.get_cheapest_stations(catalog, a.fuel_type, a.limit),
    ),
}


def get_tool(name: str) -> ToolSpec:
    """Look up a registered tool, raising UnknownTool for anything else."""
    try:
        return REGISTRY[ToolName(name)]
    except ValueError:
        raise UnknownTool(str(name)) from None


def tool_descriptors() -> list[dict]:
    """Name, description and input schema of every registered tool."""
    return [
        {"name": spec.name.value, "description": spec.description, "inputSchema": spec.input_schema()}
        for spec in REGISTRY.values()
    ]


def dispatch(
    name: str,
    args: Optional[Mapping[str, Any]] = None,
    catalog: Optional[Sequence[Station]] = None,
) -> dict:
    """Validate ``args`` for tool ``name`` and run it against the catalog.

    Raises:
        UnknownTool: ``name`` is not registered.
        InvalidArgs: ``args`` violate the tool's schema.
        DataIntegrityError: a catalog record can't be priced.
    """
    spec = get_tool(name)
    validated = spec.validate(args)
    if catalog is None:
        catalog = get_catalog()
    logger.debug("Dispatching %s over %d stations", spec.name.value, len(catalog))
    return spec.handler(catalog, validated)
