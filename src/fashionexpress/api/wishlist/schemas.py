"""Pydantic request/response schemas for the Wishlist API."""

from pydantic import BaseModel, ConfigDict

from fashionexpress.api.catalogue.schemas import ProductResponse


class AddToWishlistRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    product_id: str


class WishlistItemResponse(BaseModel):
    id: str
    user_id: str
    product_id: str
    product: ProductResponse


class StatusResponse(BaseModel):
    status: str = "ok"
