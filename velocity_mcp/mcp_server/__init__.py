from velocity_mcp.mcp_server.server import build_registry, create_mcp_server, serve

__all__ = ["build_registry", "create_mcp_server", "serve"]
