"""Map search results to storefront page paths."""

from __future__ import annotations

from storefront.domain.models import ProductType, SearchResultItem

HOME_PATH = "/"


def _segment(value: str | None) -> str:
    # A missing id renders the way the browser router receives it.
    return "undefined" if value is None else str(value)


def detail_path(item: SearchResultItem) -> str:
    """Return the detail page path for ``item``.

    Units live under their parent course. ``parent_id`` is not checked, so a
    unit without one produces ``/courses/undefined/unit/<id>``.
    """

    if item.type == ProductType.COURSE.value:
        return f"/courses/{_segment(item.id)}"
    if item.type == ProductType.UNIT.value:
        return f"/courses/{_segment(item.parent_id)}/unit/{_segment(item.id)}"
    if item.type == ProductType.LESSON.value:
        return f"/lessons/{_segment(item.id)}"
    return HOME_PATH


__all__ = ["HOME_PATH", "detail_path"]
