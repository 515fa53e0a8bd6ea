"""Dropdown open/closed transitions."""

from __future__ import annotations

import asyncio

import pytest

from storefront.search.dropdown import Dropdown, DropdownState


def test_starts_closed():
    assert Dropdown().state is DropdownState.CLOSED


def test_focus_opens_only_with_query():
    dropdown = Dropdown()
    dropdown.focus(has_query=False)
    assert not dropdown.is_open
    dropdown.focus(has_query=True)
    assert dropdown.is_open


@pytest.mark.asyncio
async def test_blur_closes_after_grace():
    dropdown = Dropdown(blur_grace=0.02)
    dropdown.results_loaded()

    dropdown.blur()
    assert dropdown.is_open
    assert dropdown.closing

    await asyncio.sleep(0.08)
    assert dropdown.state is DropdownState.CLOSED
    assert not dropdown.closing


@pytest.mark.asyncio
async def test_refocus_during_grace_keeps_open():
    dropdown = Dropdown(blur_grace=0.02)
    dropdown.results_loaded()

    dropdown.blur()
    dropdown.focus(has_query=True)
    await asyncio.sleep(0.08)

    assert dropdown.is_open


@pytest.mark.asyncio
async def test_select_and_clear_close_immediately():
    dropdown = Dropdown(blur_grace=0.02)
    dropdown.results_loaded()
    dropdown.blur()
    dropdown.select()
    assert not dropdown.is_open
    assert not dropdown.closing

    dropdown.results_loaded()
    dropdown.clear()
    assert not dropdown.is_open
