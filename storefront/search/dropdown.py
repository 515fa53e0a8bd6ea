"""Open/closed state for the search results dropdown."""

from __future__ import annotations

from enum import Enum

from storefront.search.debounce import Debouncer


class DropdownState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class Dropdown:
    """Two-state model driven by discrete input events.

    Losing focus does not close the list straight away: the close waits for
    ``blur_grace`` seconds so a selection made inside the list still lands.
    A focus or selection during that window cancels the delayed close.
    """

    def __init__(self, blur_grace: float = 0.2) -> None:
        self.state = DropdownState.CLOSED
        self._pending_close: Debouncer[None] = Debouncer(blur_grace, lambda _: self._set_closed())

    @property
    def is_open(self) -> bool:
        return self.state is DropdownState.OPEN

    @property
    def closing(self) -> bool:
        return self._pending_close.pending

    def results_loaded(self) -> None:
        self.state = DropdownState.OPEN

    def focus(self, has_query: bool) -> None:
        self._pending_close.cancel()
        if has_query:
            self.state = DropdownState.OPEN

    def blur(self) -> None:
        self._pending_close.call(None)

    def select(self) -> None:
        self._pending_close.cancel()
        self._set_closed()

    def clear(self) -> None:
        self._pending_close.cancel()
        self._set_closed()

    def cancel_pending_close(self) -> None:
        self._pending_close.cancel()

    def _set_closed(self) -> None:
        self.state = DropdownState.CLOSED


__all__ = ["Dropdown", "DropdownState"]
