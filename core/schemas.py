# =============================================================================
# core/schemas.py  -  Tool argument schemas
# =============================================================================
#
# One Pydantic model per tool.  These models are the single source of truth
# for tool arguments:
#   - core/registry.py validates incoming arguments against them, and
#   - tools/mcp_server.py advertises their JSON schema to MCP clients.
#
# Validation is strict: "3" is not a limit and 95 is not a fuel type.
# Client-facing names are camelCase (fuelType) via aliases; unknown keys
# are ignored.
# =============================================================================

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from core.models import DEFAULT_FUEL_TYPE, FuelType
from core.stations import DEFAULT_CHEAPEST_LIMIT


class ToolArgs(BaseModel):
    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )


class FindStationsArgs(ToolArgs):
    origin: str = Field(..., min_length=1, description="Origin city (e.g., 'A Coruña')")
    destination: str = Field(..., min_length=1, description="Destination city (e.g., 'Madrid')")
    fuel_type: FuelType = Field(
        DEFAULT_FUEL_TYPE,
        alias="fuelType",
        description="Type of fuel used to order stations by price",
    )


class BestOffersArgs(ToolArgs):
    route: Optional[str] = Field(
        None,
        description="Route in format 'Origin-Destination' (informational only)",
    )


class CheapestStationsArgs(ToolArgs):
    fuel_type: FuelType = Field(..., alias="fuelType", description="Type of fuel to compare prices")
    limit: int = Field(
        DEFAULT_CHEAPEST_LIMIT,
        ge=0,
        description=f"Maximum number of stations to return (default: {DEFAULT_CHEAPEST_LIMIT})",
    )
