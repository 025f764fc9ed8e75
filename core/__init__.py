# =============================================================================
# core/__init__.py
# =============================================================================
# The fuel-station catalog and everything that answers questions about it:
# data models, loading, the three query operations, argument schemas and the
# tool registry that dispatches to them.
#
# Nothing in this package imports FastMCP or Google ADK.  The MCP server
# (tools/) and the agent (agent/) sit on top of it; core/ can be used and
# tested on its own.
# =============================================================================
