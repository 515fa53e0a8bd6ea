"""Typeahead product search bar, independent of any UI toolkit."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

from pydantic import ValidationError

from storefront.config import SearchWidgetSettings
from storefront.domain.models import SearchResultItem
from storefront.logging import logger
from storefront.search.debounce import Debouncer
from storefront.search.dropdown import Dropdown, DropdownState
from storefront.search.routing import detail_path
from storefront.services.exceptions import ServiceError
from storefront.services.media import MediaResolver


class ProductSearchBackend(Protocol):
    async def search(self, query: str, limit: int = ...) -> list[SearchResultItem]:
        ...


@dataclass(slots=True)
class ResultRow:
    item: SearchResultItem
    path: str
    thumbnail: str | None


class ProductSearchBar:
    """State holder for the storefront search box.

    The host forwards input events (``change``, ``focus``, ``blur``,
    ``select``) from the event loop thread and renders ``rows()`` while
    ``is_open``. Lookups are debounced; only the response for the most
    recently issued query is applied, older ones are dropped on arrival.
    Lookup failures are logged and stored in ``last_error`` but never raised
    to the host.
    """

    def __init__(
        self,
        backend: ProductSearchBackend,
        settings: SearchWidgetSettings | None = None,
        *,
        navigate: Callable[[str], None] | None = None,
        media: MediaResolver | None = None,
    ) -> None:
        self._backend = backend
        self._settings = settings or SearchWidgetSettings()
        self._navigate = navigate
        self._media = media or MediaResolver()

        self.query = ""
        self.loading = False
        self.results: list[SearchResultItem] = []
        self.last_error: Exception | None = None
        self.last_navigation: str | None = None

        self._generation = 0
        self._tasks: set[asyncio.Task[None]] = set()
        self._debouncer: Debouncer[str] = Debouncer(
            self._settings.debounce_ms / 1000, self._start_lookup
        )
        self._dropdown = Dropdown(blur_grace=self._settings.blur_grace_ms / 1000)

    @property
    def state(self) -> DropdownState:
        return self._dropdown.state

    @property
    def is_open(self) -> bool:
        return self._dropdown.is_open

    @property
    def visible_results(self) -> Sequence[SearchResultItem]:
        if self.is_open and self.results:
            return self.results
        return []

    @property
    def shows_no_results(self) -> bool:
        return self.is_open and not self.results and not self.loading

    @property
    def lookup_pending(self) -> bool:
        return self._debouncer.pending

    def rows(self) -> list[ResultRow]:
        return [
            ResultRow(item=item, path=detail_path(item), thumbnail=self._media.thumbnail_url(item))
            for item in self.visible_results
        ]

    def change(self, value: str) -> None:
        self.query = value
        self._debouncer.cancel()
        if not value:
            # Abandon whatever is still in flight so it cannot reopen the list.
            self._generation += 1
            self.loading = False
            self.results = []
            self._dropdown.clear()
            return
        self._debouncer.call(value)

    def focus(self) -> None:
        self._dropdown.focus(has_query=bool(self.query))

    def blur(self) -> None:
        self._dropdown.blur()

    def select(self, item: SearchResultItem) -> str:
        path = detail_path(item)
        self._dropdown.select()
        self.last_navigation = path
        logger.info("product_search_selected", item_id=item.id, item_type=item.type, path=path)
        if self._navigate is not None:
            self._navigate(path)
        return path

    async def wait_idle(self) -> None:
        """Wait until no lookup is scheduled or in flight."""

        while self._debouncer.pending or self._tasks:
            if self._tasks:
                await asyncio.gather(*list(self._tasks), return_exceptions=True)
            else:
                await asyncio.sleep(self._debouncer.delay)

    async def aclose(self) -> None:
        self._debouncer.cancel()
        self._dropdown.cancel_pending_close()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def _start_lookup(self, query: str) -> None:
        self._generation += 1
        generation = self._generation
        self.loading = True
        task = asyncio.get_running_loop().create_task(self._lookup(query, generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _lookup(self, query: str, generation: int) -> None:
        logger.debug("product_search_issued", query=query, generation=generation)
        try:
            results = await self._backend.search(query, limit=self._settings.page_size)
        except (ServiceError, ValidationError) as exc:
            if generation == self._generation:
                self.loading = False
                self.last_error = exc
            logger.warning(
                "product_search_failed",
                query=query,
                generation=generation,
                error=str(exc),
            )
            return

        if generation != self._generation:
            logger.debug(
                "product_search_stale",
                query=query,
                generation=generation,
                latest_generation=self._generation,
            )
            return

        self.loading = False
        self.last_error = None
        self.results = list(results)
        self._dropdown.results_loaded()
        logger.debug("product_search_applied", query=query, result_count=len(self.results))


__all__ = ["ProductSearchBackend", "ProductSearchBar", "ResultRow"]
