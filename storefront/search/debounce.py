"""Delay a callback until input has been quiet for a fixed interval."""

from __future__ import annotations

import asyncio
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Debouncer(Generic[T]):
    """Run ``callback(value)`` once the last ``call`` is ``delay`` seconds old.

    Each ``call`` replaces the pending timer, so only one is ever live. Must be
    used from inside a running event loop.
    """

    def __init__(self, delay: float, callback: Callable[[T], None]) -> None:
        self.delay = delay
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def call(self, value: T) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, value)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, value: T) -> None:
        self._handle = None
        self._callback(value)


__all__ = ["Debouncer"]
