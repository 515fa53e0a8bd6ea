"""Shared fixtures: fast widget timings and a scriptable search backend."""

from __future__ import annotations

import asyncio

import pytest

from storefront.config import SearchWidgetSettings
from storefront.domain.models import SearchResultItem


def make_item(item_id: str, item_type: str = "COURSE", **extra) -> SearchResultItem:
    return SearchResultItem(id=item_id, title=f"Title {item_id}", type=item_type, **extra)


class ScriptedBackend:
    """Search backend whose answers (and timing) are controlled by the test."""

    def __init__(self, responses: dict[str, object] | None = None) -> None:
        self.responses = responses or {}
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[tuple[str, int]] = []

    def hold(self, query: str) -> asyncio.Event:
        gate = asyncio.Event()
        self.gates[query] = gate
        return gate

    async def search(self, query: str, limit: int = 8) -> list[SearchResultItem]:
        self.calls.append((query, limit))
        gate = self.gates.get(query)
        if gate is not None:
            await gate.wait()
        response = self.responses.get(query, [])
        if isinstance(response, Exception):
            raise response
        return list(response)


@pytest.fixture
def widget_settings() -> SearchWidgetSettings:
    return SearchWidgetSettings(debounce_ms=20, blur_grace_ms=20, page_size=8)


@pytest.fixture
def backend() -> ScriptedBackend:
    return ScriptedBackend()


@pytest.fixture(name="make_item")
def make_item_fixture():
    return make_item
