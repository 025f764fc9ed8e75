# =============================================================================
# core/errors.py  -  Error taxonomy for the station catalog
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Defines the three failures the core can report.  Every one of them is a
#   recoverable, caller-facing condition: the core raises it, the protocol
#   adapter (tools/mcp_server.py) turns it into an isError result.
#
#   UnknownTool         dispatch() was given a name that isn't registered
#   InvalidArgs         arguments failed the tool's schema
#   DataIntegrityError  a catalog record is missing data it must have
#
# Nothing here retries.  The operations are pure, so calling again with the
# same input gives the same error.
# =============================================================================

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Machine-readable tag carried by every catalog error."""

    UNKNOWN_TOOL = "UnknownTool"
    INVALID_ARGS = "InvalidArgs"
    DATA_INTEGRITY = "DataIntegrityError"


class StationCatalogError(Exception):
    """Base class for errors raised by the core."""

    kind: ErrorKind

    def to_dict(self) -> dict:
        return {"error": self.kind.value, "message": str(self)}


class UnknownTool(StationCatalogError):
    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tool not found: {name}")


class InvalidArgs(StationCatalogError):
    """A tool argument violated its schema.

    Attributes:
        tool: The tool whose schema was violated.
        field: The offending argument name, as the client spells it
               (e.g. "fuelType", not "fuel_type").
        constraint: The violated rule ("missing", "literal_error",
                    "int_type", ...).
    """

    kind = ErrorKind.INVALID_ARGS

    def __init__(self, tool: str, field: str, constraint: str, detail: str = ""):
        self.tool = tool
        self.field = field
        self.constraint = constraint
        self.detail = detail
        message = f"Invalid arguments for '{tool}': field '{field}' violates '{constraint}'"
        if detail:
            message += f" ({detail})"
        super().__init__(message)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(tool=self.tool, field=self.field, constraint=self.constraint)
        return data


class DataIntegrityError(StationCatalogError):
    """A catalog record is malformed (e.g. a fuel price is missing)."""

    kind = ErrorKind.DATA_INTEGRITY

    def __init__(self, station: Optional[str], field: str, detail: str):
        self.station = station
        self.field = field
        self.detail = detail
        who = f"station '{station}'" if station else "catalog record"
        super().__init__(f"Data integrity violation in {who}: {field} {detail}")
