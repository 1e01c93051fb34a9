from velocity_mcp.tools.adapters.local_adapter import LocalToolAdapter

__all__ = ["LocalToolAdapter"]
