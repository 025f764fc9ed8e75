# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (the protocol adapter)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Hosts the Tool Registry (core/registry.py) over MCP.  It is the only
#   place that knows about the wire:
#     - every registry entry becomes one MCP tool, with the registry's own
#       description and JSON schema (nothing here re-declares arguments);
#     - a successful payload goes back as one text block of pretty JSON;
#     - a catalog error goes back as the same shape with isError set and the
#       error message as the text.
#
# HOW IT WORKS (the flow):
#   1. An MCP client calls a tool by name (e.g. "get_cheapest_stations")
#   2. FastMCP routes the call to CatalogTool.run()
#   3. execute() hands (name, arguments) to core.registry.dispatch()
#   4. The payload (or error) is serialized and returned
#
# RUNNING THIS SERVER:
#   python -m tools.mcp_server              (from the project root)
#   MCP_TRANSPORT=http PORT=8787 python -m tools.mcp_server
#
#   With no MCP_TRANSPORT set, stdio is used when stdin is piped and no PORT
#   is given (i.e. when an MCP client spawned us), HTTP otherwise.
# =============================================================================

import json
import logging
import sys
from typing import Any, Optional, Sequence

from fastmcp import FastMCP
from fastmcp.tools import Tool, ToolResult
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from core.errors import StationCatalogError
from core.models import Station
from core.registry import REGISTRY, dispatch
from core.settings import Settings

SERVER_NAME = "fuel-stations"
SERVER_VERSION = "1.0.0"
HEALTH_MESSAGE = "Shell Stations MCP server is running!"

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: in stdio mode STDOUT *is* the MCP message stream, and a
# stray log line there would corrupt it.
#
#   CYAN   incoming tool call + arguments
#   YELLOW status / errors returned to the client
#   GREEN  response JSON
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger("fuel_stations.mcp")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, arguments: dict) -> None:
    param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, payload: dict) -> None:
    logger.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(payload, ensure_ascii=False, separators=(',', ':'))}{_RESET}"
    )


# =============================================================================
# Call handling (transport-independent)
# =============================================================================

def serialize_payload(payload: dict) -> str:
    """JSON text for a payload.  Deterministic: same payload, same bytes.

    Raises ValueError on NaN or Infinity rather than emitting invalid JSON.
    """
    return json.dumps(payload, ensure_ascii=False, indent=2, allow_nan=False)


def execute(
    name: str,
    arguments: Optional[dict],
    catalog: Optional[Sequence[Station]] = None,
) -> tuple[str, bool]:
    """Run one tool call and return (text, is_error)."""
    arguments = arguments or {}
    _log_request(name, arguments)
    try:
        payload = dispatch(name, arguments, catalog)
    except StationCatalogError as exc:
        logger.warning(f"{_YELLOW}  ✗ {name} failed: {exc}{_RESET}")
        return str(exc), True
    _log_response(name, payload)
    return serialize_payload(payload), False


def call_tool_content(
    name: str,
    arguments: Optional[dict],
    catalog: Optional[Sequence[Station]] = None,
) -> dict:
    """Run a tool call and wrap the outcome in the MCP result envelope.

        {"content": [{"type": "text", "text": "..."}]}                 success
        {"content": [{"type": "text", "text": "..."}], "isError": true} failure
    """
    text, is_error = execute(name, arguments, catalog)
    envelope: dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if is_error:
        envelope["isError"] = True
    return envelope


# =============================================================================
# FastMCP wiring
# =============================================================================

class CatalogTool(Tool):
    """An MCP tool backed by one Tool Registry entry."""

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        text, is_error = execute(self.name, arguments)
        return ToolResult(content=text, is_error=is_error)


async def health(request: Request) -> PlainTextResponse:
    return PlainTextResponse(HEALTH_MESSAGE)


def create_server() -> FastMCP:
    """Build the FastMCP server with one tool per registry entry."""
    server = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    for spec in REGISTRY.values():
        server.add_tool(
            CatalogTool(
                name=spec.name.value,
                description=spec.description,
                parameters=spec.input_schema(),
            )
        )

    server.custom_route("/", methods=["GET"])(health)

    return server


mcp = create_server()


# =============================================================================
# Server entry point
# =============================================================================

def main() -> None:
    settings = Settings.load()
    configure_logging(settings.log_level)

    if settings.transport == "stdio":
        _log_status("Starting fuel stations MCP server in stdio mode")
        mcp.run(transport="stdio")
    else:
        _log_status(
            f"Fuel stations MCP server listening on "
            f"{settings.host}:{settings.port}{settings.mcp_path}"
        )
        mcp.run(
            transport="http",
            host=settings.host,
            port=settings.port,
            path=settings.mcp_path,
        )


if __name__ == "__main__":
    main()
