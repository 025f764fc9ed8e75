# =============================================================================
# tools/__init__.py
# =============================================================================
# The MCP protocol adapter.
#
# tools/ translates between MCP and core.registry:
#   - advertises one MCP tool per registry entry, schema taken from the
#     registry's Pydantic argument models;
#   - passes (name, arguments) to core.registry.dispatch();
#   - wraps the payload, or the catalog error, as MCP text content.
#
# It holds no business logic and never re-declares a tool's arguments.
# =============================================================================
