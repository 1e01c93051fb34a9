"""Command-line entry point."""

import argparse
import asyncio
import logging
import sys

from velocity_mcp import __version__
from velocity_mcp.config.log import configure_logging
from velocity_mcp.config.settings import load_settings
from velocity_mcp.domain.errors import ConfigurationError
from velocity_mcp.mcp_server.server import serve

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="velocity-mcp",
        description="MCP server for DevOps Velocity",
    )
    parser.add_argument("--url", help="GraphQL endpoint (VELOCITY_GRAPHQL_URL)")
    parser.add_argument("--token", help="Access key or session cookies (VELOCITY_ACCESS_TOKEN)")
    parser.add_argument("--tenant-id", help="Default tenant (VELOCITY_TENANT_ID)")
    parser.add_argument("--env-file", default=".env", help="Dotenv file to read")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        settings = load_settings(
            url=args.url,
            token=args.token,
            tenant_id=args.tenant_id,
            env_file=args.env_file,
        )
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1

    configure_logging(settings.log_level)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
