"""Debouncer timer behaviour."""

from __future__ import annotations

import asyncio

import pytest

from storefront.search.debounce import Debouncer


@pytest.mark.asyncio
async def test_burst_collapses_to_last_value():
    fired: list[str] = []
    debouncer = Debouncer(0.02, fired.append)

    for value in ("a", "ab", "abc"):
        debouncer.call(value)
    assert debouncer.pending

    await asyncio.sleep(0.08)
    assert fired == ["abc"]
    assert not debouncer.pending


@pytest.mark.asyncio
async def test_spaced_calls_each_fire():
    fired: list[str] = []
    debouncer = Debouncer(0.02, fired.append)

    debouncer.call("a")
    await asyncio.sleep(0.08)
    debouncer.call("ab")
    await asyncio.sleep(0.08)

    assert fired == ["a", "ab"]


@pytest.mark.asyncio
async def test_cancel_drops_pending_call():
    fired: list[str] = []
    debouncer = Debouncer(0.02, fired.append)

    debouncer.call("a")
    debouncer.cancel()
    await asyncio.sleep(0.08)

    assert fired == []
    assert not debouncer.pending
