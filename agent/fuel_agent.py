# =============================================================================
# agent/fuel_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the Google ADK agent that answers fuel-station questions.  The
#   agent holds no business logic and no data; it talks to the MCP server in
#   tools/mcp_server.py, which it launches as a stdio subprocess.
#
#   ┌──────────────────────┐   stdio MCP   ┌──────────────────────┐
#   │  ADK Agent           │──────────────▶│  tools/mcp_server    │
#   │  (LiteLlm model)     │               │  (FastMCP adapter)   │
#   └──────────────────────┘               └──────────┬───────────┘
#                                                     ▼
#                                          ┌──────────────────────┐
#                                          │  core/ registry +    │
#                                          │  query operations    │
#                                          └──────────────────────┘
#
# MODEL:
#   Any LiteLlm model string works (settings.agent_model, AGENT_MODEL in the
#   environment).  The default routes GPT-4o through OpenRouter and needs
#   OPENROUTER_API_KEY.
# =============================================================================

import os
import sys
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import McpToolset, StdioConnectionParams
from mcp import StdioServerParameters

from agent.prompt import get_fuel_advisor_prompt
from core.settings import Settings

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_toolset(settings: Settings) -> McpToolset:
    """MCP toolset that spawns the fuel stations server over stdio.

    The subprocess runs with the same interpreter as this process, from the
    project root, so `core` and `tools` import the same way they do here.
    MCP_TRANSPORT is pinned to stdio for the child regardless of our own
    environment.
    """
    env = dict(os.environ)
    env["MCP_TRANSPORT"] = "stdio"
    env["STATIONS_DATA_PATH"] = str(settings.stations_data_path)
    env["LOG_LEVEL"] = settings.log_level

    return McpToolset(
        connection_params=StdioConnectionParams(
            server_params=StdioServerParameters(
                command=sys.executable,
                args=["-m", "tools.mcp_server"],
                cwd=PROJECT_ROOT,
                env=env,
            ),
        ),
    )


def create_agent(settings: Optional[Settings] = None) -> Agent:
    """Create the fuel-station advisor agent.

    Returns:
        A configured Google ADK Agent with the fuel stations MCP tools.
    """
    settings = settings or Settings.load()

    return Agent(
        name="fuel_station_advisor",
        model=LiteLlm(model=settings.agent_model),
        instruction=get_fuel_advisor_prompt(),
        tools=[create_toolset(settings)],
    )
