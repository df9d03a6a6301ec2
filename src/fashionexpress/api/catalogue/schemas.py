"""Pydantic response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class CategoryResponse(BaseModel):
    id: str
    name: str
    image: str
    description: str | None = None


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str
    price: float
    discount_price: float | None = None
    stock: int
    image: str
    category_id: str
    brand: str
    ratings: float
    num_reviews: int
    is_featured: bool
    created_at: datetime | None = None
