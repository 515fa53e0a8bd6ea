"""Command-line entrypoint: type a query into the search bar and print the dropdown."""

from __future__ import annotations

import asyncio
import sys

import httpx

from storefront.config import get_settings
from storefront.logging import configure_logging, logger
from storefront.search.widget import ProductSearchBar
from storefront.services.api_client import ApiClient
from storefront.services.media import MediaResolver
from storefront.services.products import ProductCatalogService


async def main(query: str) -> int:
    settings = get_settings()
    # stdout carries only the result rows.
    configure_logging(settings.log_level, stream="stderr")

    async with httpx.AsyncClient() as http_client:
        api = ApiClient(http_client, settings.api)
        search_bar = ProductSearchBar(
            ProductCatalogService(api),
            settings.search,
            media=MediaResolver(settings.media),
        )
        logger.info("search_cli_starting", environment=settings.environment, query=query)

        try:
            search_bar.focus()
            # Keystrokes arrive faster than the debounce interval; only the full query is looked up.
            for end in range(1, len(query) + 1):
                search_bar.change(query[:end])
            await search_bar.wait_idle()
        finally:
            await search_bar.aclose()

    if search_bar.last_error is not None:
        print(f"Search failed: {search_bar.last_error}", file=sys.stderr)
        return 1
    rows = search_bar.rows()
    if not rows:
        print("No results.")
    for row in rows:
        print(f"{row.item.type:<8} {row.item.title}  ->  {row.path}")
    return 0


def cli() -> None:
    if len(sys.argv) < 2:
        print("usage: storefront-search <query>", file=sys.stderr)
        sys.exit(2)
    sys.exit(asyncio.run(main(" ".join(sys.argv[1:]))))


if __name__ == "__main__":
    cli()
