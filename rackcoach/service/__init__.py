"""Request boundary: schemas, command handler, tool registry and MCP server."""
