"""FastAPI routes for the shopper's wishlist."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from fashionexpress.api.catalogue.routes import product_response
from fashionexpress.api.identity.dependencies import current_user_id
from fashionexpress.api.wishlist.schemas import AddToWishlistRequest, StatusResponse, WishlistItemResponse
from fashionexpress.product.queries import get_product
from fashionexpress.shared.commands import dispatch
from fashionexpress.wishlist.item import WishlistItem
from fashionexpress.wishlist.management import AddToWishlist, RemoveFromWishlist, wishlist_with_products

wishlist_router = APIRouter(prefix="/wishlist", tags=["wishlist"])


def wishlist_item_response(item, product) -> WishlistItemResponse:
    return WishlistItemResponse(
        id=str(item.id),
        user_id=str(item.user_id),
        product_id=str(item.product_id),
        product=product_response(product),
    )


@wishlist_router.get("", response_model=list[WishlistItemResponse])
async def get_wishlist(user_id: str = Depends(current_user_id)) -> list[WishlistItemResponse]:
    return [wishlist_item_response(item, product) for item, product in wishlist_with_products(user_id)]


@wishlist_router.post("", status_code=201, response_model=WishlistItemResponse)
async def add_to_wishlist(body: AddToWishlistRequest, user_id: str = Depends(current_user_id)) -> WishlistItemResponse:
    item_id = dispatch(
        AddToWishlist(user_id=user_id, product_id=body.product_id)
    )
    item = current_domain.repository_for(WishlistItem).get(item_id)
    return wishlist_item_response(item, get_product(item.product_id))


@wishlist_router.delete("/{item_id}", response_model=StatusResponse)
async def remove_from_wishlist(item_id: str, user_id: str = Depends(current_user_id)) -> StatusResponse:
    dispatch(
        RemoveFromWishlist(user_id=user_id, item_id=item_id)
    )
    return StatusResponse()
