"""Pydantic models for storefront API payloads."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProductType(str, Enum):
    COURSE = "COURSE"
    UNIT = "UNIT"
    SUBUNIT = "SUBUNIT"
    LESSON = "LESSON"


class _WireModel(BaseModel):
    """Accepts the camelCase names the API sends; exposes snake_case attributes."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)


class SearchResultItem(_WireModel):
    id: str
    title: str
    # Kept as a plain string: unknown discriminants are valid and route home.
    type: str
    image_url: str | None = Field(default=None, alias="imageUrl")
    description: str | None = None
    parent_id: str | None = Field(default=None, alias="parentId")


class Product(_WireModel):
    id: str
    title: str
    type: ProductType
    description: str | None = None
    price: float | None = None
    study_guide_url: str | None = Field(default=None, alias="studyGuideUrl")
    digital_url: str | None = Field(default=None, alias="digitalUrl")
    preview_url: str | None = Field(default=None, alias="previewUrl")
    image_url: str | None = Field(default=None, alias="imageUrl")
    color_button: str | None = Field(default=None, alias="colorButton")
    course_included: str | None = Field(default=None, alias="courseIncluded")
    parent_id: str | None = Field(default=None, alias="parentId")
    is_active: bool = Field(default=True, alias="isActive")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


class ApiEnvelope(_WireModel):
    status: str | None = None
    message: str | None = None
    data: Any = None


__all__ = [
    "ApiEnvelope",
    "Product",
    "ProductType",
    "SearchResultItem",
]
