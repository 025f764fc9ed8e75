# =============================================================================
# agent/__init__.py
# =============================================================================
# The Google ADK agent that answers fuel-station questions in plain language.
#
# The agent decides WHICH tool to call and with WHAT arguments (it is where
# "the 3 cheapest 95 stations" becomes fuelType="unleaded95", limit=3), then
# explains the result.  Prices, ordering and filtering all happen in core/,
# reached through the MCP server in tools/.
# =============================================================================
