# =============================================================================
# core/settings.py  -  Runtime configuration
# =============================================================================
#
# Loads .env (if present), then reads environment variables.  Every value has
# a default so `python tools/mcp_server.py` works with no setup at all.
#
#   STATIONS_DATA_PATH   catalog JSON file (default: bundled core/data/stations.json)
#   MCP_TRANSPORT        "stdio" | "http"  (default: auto-detect, see below)
#   HOST / PORT          HTTP bind address (default 0.0.0.0:8787)
#   MCP_PATH             HTTP endpoint path (default /mcp)
#   LOG_LEVEL            stdlib logging level name (default INFO)
#   AGENT_MODEL          LiteLlm model string for the agent
#
# Transport auto-detection: with no PORT in the environment and a non-TTY
# stdin we are almost certainly a subprocess spawned by an MCP client, so we
# speak stdio.  Otherwise we serve HTTP.
# =============================================================================

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DATA_PATH = Path(__file__).resolve().parent / "data" / "stations.json"
TRANSPORTS = ("stdio", "http")


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _detect_transport() -> str:
    try:
        interactive = sys.stdin is not None and sys.stdin.isatty()
    except (OSError, ValueError):
        interactive = False
    if _env("PORT") is None and not interactive:
        return "stdio"
    return "http"


def stations_data_path(dotenv_path: Optional[str] = None) -> Path:
    """STATIONS_DATA_PATH alone, without validating the server settings."""
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return Path(_env("STATIONS_DATA_PATH", str(DEFAULT_DATA_PATH)))


@dataclass(frozen=True)
class Settings:
    stations_data_path: Path
    transport: str
    host: str
    port: int
    mcp_path: str
    log_level: str
    agent_model: str

    @classmethod
    def load(cls, dotenv_path: Optional[str] = None) -> "Settings":
        load_dotenv(dotenv_path=dotenv_path, override=False)

        transport = (_env("MCP_TRANSPORT") or _detect_transport()).lower()
        if transport not in TRANSPORTS:
            raise ValueError(f"MCP_TRANSPORT must be one of {TRANSPORTS}, got {transport!r}")

        raw_port = _env("PORT", "8787")
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}") from None
        if not 0 < port < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {port}")

        mcp_path = _env("MCP_PATH", "/mcp")
        if not mcp_path.startswith("/"):
            mcp_path = "/" + mcp_path

        return cls(
            stations_data_path=stations_data_path(dotenv_path),
            transport=transport,
            host=_env("HOST", "0.0.0.0"),
            port=port,
            mcp_path=mcp_path,
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            agent_model=_env("AGENT_MODEL", "openrouter/openai/gpt-4o"),
        )
