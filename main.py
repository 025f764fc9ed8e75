# =============================================================================
# main.py  -  Entry Point for the Fuel Station Advisor
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#       Interactive chat with the ADK agent.  The agent launches the MCP
#       server (tools/mcp_server.py) as a subprocess and calls its tools.
#
#   python main.py --tool get_cheapest_stations --args '{"fuelType": "diesel", "limit": 2}'
#       One-shot: dispatch a single tool call against the local catalog and
#       print the result as station cards.  No LLM, no API key needed.
#
#   python main.py --list-tools
#       Print the registered tools and their argument schemas.
#
# THE AGENT LOOP:
#   "Where's the cheapest diesel between A Coruña and Madrid?" →
#     a) the LLM picks a tool and arguments
#     b) ADK calls it over MCP
#     c) the LLM turns the JSON result into an answer
# =============================================================================

import argparse
import asyncio
import json
import sys

from dotenv import load_dotenv

# Load .env before anything reads the environment (LiteLlm picks up
# OPENROUTER_API_KEY / OPENAI_API_KEY when it initializes).
load_dotenv()

from core.errors import StationCatalogError
from core.presentation import format_tool_result
from core.registry import dispatch, tool_descriptors
from core.settings import Settings

APP_NAME = "fuel_station_advisor"
USER_ID = "demo_user"


async def run_agent(settings: Settings) -> None:
    """Run the fuel-station advisor agent interactively."""
    # ADK is imported here so the one-shot modes work without it installed
    # and configured.
    from google.adk.runners import Runner
    from google.adk.sessions import InMemorySessionService
    from google.genai import types

    from agent.fuel_agent import create_agent

    print("=" * 70)
    print("  FUEL STATION ADVISOR")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print(f"\n🔧 Initializing agent ({settings.agent_model})...")
    agent = create_agent(settings)

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about fuel stations, prices or offers on your route.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


def run_tool(tool_name: str, raw_args: str) -> int:
    """Dispatch one tool call locally and print it as station cards."""
    try:
        arguments = json.loads(raw_args)
    except json.JSONDecodeError as exc:
        print(f"❌ --args is not valid JSON: {exc}", file=sys.stderr)
        return 1

    try:
        payload = dispatch(tool_name, arguments)
    except StationCatalogError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"❌ Could not load the station catalog: {exc}", file=sys.stderr)
        return 1

    print(format_tool_result(tool_name, payload))
    return 0


def list_tools() -> int:
    for tool in tool_descriptors():
        print(f"{tool['name']}: {tool['description']}")
        print(json.dumps(tool["inputSchema"], ensure_ascii=False, indent=2))
        print()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fuel station advisor (MCP tools + agent)")
    parser.add_argument("--tool", help="Call one tool directly instead of starting the chat.")
    parser.add_argument("--args", default="{}", help="JSON object of tool arguments (with --tool).")
    parser.add_argument("--list-tools", action="store_true", help="Print the registered tools and exit.")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.list_tools:
        return list_tools()
    if args.tool:
        return run_tool(args.tool, args.args)
    asyncio.run(run_agent(Settings.load()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
