"""Search result to page path mapping."""

from __future__ import annotations

import pytest

from storefront.domain.models import SearchResultItem
from storefront.search.routing import HOME_PATH, detail_path


def _item(**payload) -> SearchResultItem:
    return SearchResultItem.model_validate(payload)


def test_course_routes_to_course_page():
    assert detail_path(_item(id="c1", type="COURSE", title="X")) == "/courses/c1"


def test_unit_routes_under_parent_course():
    item = _item(id="u1", type="UNIT", parentId="c1", title="Y")
    assert detail_path(item) == "/courses/c1/unit/u1"


def test_lesson_routes_to_lesson_page():
    assert detail_path(_item(id="l1", type="LESSON", title="Z")) == "/lessons/l1"


@pytest.mark.parametrize("item_type", ["FREE_LESSON", "course", ""])
def test_unknown_type_routes_home(item_type):
    assert detail_path(_item(id="x1", type=item_type, title="W")) == HOME_PATH == "/"


def test_unit_without_parent_is_not_validated():
    item = _item(id="u9", type="UNIT", title="Orphan")
    assert detail_path(item) == "/courses/undefined/unit/u9"
