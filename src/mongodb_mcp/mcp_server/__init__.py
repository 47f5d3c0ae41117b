"""MongoDB MCP server: connection manager, operation facades and tool dispatch."""
