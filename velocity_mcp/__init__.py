"""MCP server exposing DevOps Velocity GraphQL operations as agent tools."""

__version__ = "1.0.0"
