"""MCP skills, one package per identifier family."""
