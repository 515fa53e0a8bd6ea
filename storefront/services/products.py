"""Product catalog lookups (courses, units, lessons)."""

from __future__ import annotations

from typing import Any, Sequence
from urllib.parse import quote

from pydantic import ValidationError

from storefront.domain.models import ApiEnvelope, Product, ProductType, SearchResultItem
from storefront.logging import logger
from storefront.services.api_client import ApiClient
from storefront.services.exceptions import ApiError, ProductNotFound

DEFAULT_SEARCH_LIMIT = 8

# Characters JavaScript's encodeURIComponent leaves alone besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


class ProductCatalogService:
    def __init__(self, api_client: ApiClient) -> None:
        self._api = api_client

    async def search(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[SearchResultItem]:
        """Run a typeahead lookup.

        The query is sent exactly as typed: no trimming and no minimum length.
        A payload without ``data`` is an empty result set.
        """

        endpoint = f"/api/products?search={encode_uri_component(query)}&limit={limit}"
        payload = await self._api.get(endpoint)
        return [SearchResultItem.model_validate(item) for item in _extract_items(payload)]

    async def list_products(
        self,
        product_type: ProductType | str | None = None,
        parent_id: str | None = None,
    ) -> list[Product]:
        params: dict[str, str] = {}
        if product_type:
            params["type"] = ProductType(product_type).value
        if parent_id:
            params["parentId"] = parent_id

        payload = await self._api.get("/api/products", params=params or None)
        return [Product.model_validate(item) for item in _extract_items(payload)]

    async def list_courses(self) -> list[Product]:
        return await self.list_products(ProductType.COURSE)

    async def list_units(self, course_id: str | None = None) -> list[Product]:
        return await self.list_products(ProductType.UNIT, parent_id=course_id)

    async def list_subunits(self, unit_id: str | None = None) -> list[Product]:
        return await self.list_products(ProductType.SUBUNIT, parent_id=unit_id)

    async def get_product(self, product_id: str) -> Product:
        try:
            payload = await self._api.get(f"/api/products/{encode_uri_component(product_id)}")
        except ApiError as exc:
            if exc.status == 404:
                raise ProductNotFound(f"Product {product_id} not found.") from exc
            raise

        if not isinstance(payload, dict) or not payload.get("id"):
            logger.info("product_missing_from_payload", product_id=product_id)
            raise ProductNotFound(f"Product {product_id} not found.")
        return Product.model_validate(payload)


def _extract_items(payload: Any) -> Sequence[dict[str, Any]]:
    # ApiClient already unwrapped a non-empty ``data``; anything else is an envelope without results.
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        try:
            data = ApiEnvelope.model_validate(payload).data
        except ValidationError:
            return []
        if isinstance(data, list):
            return data
    return []


__all__ = [
    "DEFAULT_SEARCH_LIMIT",
    "ProductCatalogService",
    "encode_uri_component",
]
