"""Command-line entry point for the Shopify MCP server."""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config import Settings, get_settings
from .connectors.graphql import ShopifyGraphQLClient
from .mcp.server import ShopifyMCPServer
from .observability.logging import configure_logging
from .observability.metrics import start_metrics_server
from .tools.registry import build_registry

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="shopify-mcp",
        description="MCP server for the Shopify Admin GraphQL API",
    )
    parser.add_argument(
        "--accessToken",
        dest="access_token",
        help="Shopify Admin API access token (overrides SHOPIFY_ACCESS_TOKEN)",
    )
    parser.add_argument(
        "--domain",
        dest="domain",
        help="Store domain, e.g. my-store.myshopify.com (overrides MYSHOPIFY_DOMAIN)",
    )
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace, settings: Optional[Settings] = None) -> Settings:
    """Apply command-line overrides on top of the environment settings."""
    settings = settings or get_settings()
    overrides = {}
    if args.access_token:
        overrides["shopify_access_token"] = args.access_token
    if args.domain:
        overrides["myshopify_domain"] = args.domain
    return settings.model_copy(update=overrides) if overrides else settings


async def serve(settings: Settings) -> None:
    client = ShopifyGraphQLClient(
        domain=settings.myshopify_domain,
        access_token=settings.shopify_access_token,
        api_version=settings.shopify_api_version,
        timeout=settings.shopify_request_timeout,
    )
    try:
        registry = build_registry(client)
        logger.info(
            "Serving %d tools for %s (API %s)",
            len(registry), settings.myshopify_domain, settings.shopify_api_version,
        )
        await ShopifyMCPServer(registry).run_stdio()
    finally:
        await client.aclose()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    settings = resolve_settings(args)

    missing = settings.missing_credentials()
    if missing:
        print(
            f"Error: missing {' and '.join(missing)}. "
            "Set them in the environment or pass --accessToken and --domain.",
            file=sys.stderr,
        )
        sys.exit(1)

    configure_logging(
        environment=settings.environment,
        log_level="DEBUG" if settings.debug else settings.log_level,
    )

    if settings.enable_metrics:
        start_metrics_server(settings.metrics_port)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()
