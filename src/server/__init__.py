"""FastMCP server bootstrap."""
