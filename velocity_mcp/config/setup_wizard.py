"""Interactive .env writer for first-time setup."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def render_env(token: str, graphql_url: str, tenant_id: str) -> str:
    """Dotenv content for the three required settings."""
    return (
        "# MCP DevOps Velocity Configuration\n"
        f"VELOCITY_ACCESS_TOKEN={token}\n"
        f"VELOCITY_GRAPHQL_URL={graphql_url}\n"
        f"VELOCITY_TENANT_ID={tenant_id}\n"
    )


def write_env_file(path: Path, token: str, graphql_url: str, tenant_id: str) -> Path:
    path.write_text(render_env(token, graphql_url, tenant_id), encoding="utf-8")
    return path


def run_setup(path: Path = Path(".env"), prompt=input) -> int:
    """
    Prompt for configuration and save it to a dotenv file.

    Args:
        path: Target file
        prompt: Line reader, replaced in tests

    Returns:
        Process exit code
    """
    print("MCP DevOps Velocity Configuration Setup")
    print("====================================\n")

    token = prompt("Enter your Velocity access token: ").strip()
    graphql_url = prompt(
        "Enter your Velocity GraphQL URL (e.g., https://your-server.com/graphql): "
    ).strip()
    tenant_id = prompt("Enter your Velocity tenant ID: ").strip()

    try:
        write_env_file(path, token, graphql_url, tenant_id)
    except OSError as e:
        logger.error("Error saving configuration: %s", e)
        return 1

    print(f"Configuration saved to {path}")
    print("You can now run the MCP server with: velocity-mcp")
    return 0


def main() -> int:
    return run_setup()
