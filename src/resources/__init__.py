"""MCP resources exposing repository files."""
