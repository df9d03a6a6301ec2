"""FastAPI routes for the Ordering context — cart and orders.

Every route acts on the logged-in shopper's own data.
"""

from fastapi import APIRouter, Depends

from fashionexpress.api.catalogue.routes import product_response
from fashionexpress.api.identity.dependencies import current_user_id
from fashionexpress.api.ordering.schemas import (
    AddToCartRequest,
    CartLineResponse,
    OrderDetailResponse,
    OrderItemResponse,
    OrderResponse,
    PlaceOrderRequest,
    ProgressResponse,
    StatusResponse,
    TrackingEntryResponse,
    UpdateCartItemRequest,
)
from fashionexpress.cart.items import ClearCart, RemoveCartItem
from fashionexpress.cart.service import add_to_cart, ensure_in_stock, list_with_products, update_quantity
from fashionexpress.order.order import Order
from fashionexpress.order.placement import place_order
from fashionexpress.order.queries import items_with_products, order_for_user, orders_for_user
from fashionexpress.order.status import STEP_LABELS
from fashionexpress.product.queries import get_product
from fashionexpress.shared.commands import dispatch

# ---------------------------------------------------------------------------
# Response builders
# ---------------------------------------------------------------------------
def cart_line_response(line, product) -> CartLineResponse:
    return CartLineResponse(
        id=str(line.id),
        user_id=str(line.user_id),
        product_id=str(line.product_id),
        quantity=line.quantity,
        product=product_response(product),
    )


def tracking_response(entry) -> TrackingEntryResponse:
    return TrackingEntryResponse(
        id=str(entry.id),
        status=entry.status,
        description=entry.description,
        timestamp=entry.timestamp,
    )


def _order_fields(order: Order) -> dict:
    return {
        "id": str(order.id),
        "user_id": str(order.user_id),
        "status": order.status,
        "total": order.total,
        "address": order.shipping_address.address,
        "city": order.shipping_address.city,
        "state": order.shipping_address.state,
        "pincode": order.shipping_address.pincode,
        "phone": order.phone,
        "payment_method": order.payment_method,
        "payment_status": order.payment_status,
        "created_at": order.created_at,
        "delivery_expected_by": order.delivery_expected_by,
        "items": [
            OrderItemResponse(
                id=str(item.id),
                product_id=str(item.product_id),
                quantity=item.quantity,
                price=item.price,
                product=product_response(product) if product is not None else None,
            )
            for item, product in items_with_products(order)
        ],
    }


def order_response(order: Order) -> OrderResponse:
    return OrderResponse(**_order_fields(order))


def order_detail_response(order: Order) -> OrderDetailResponse:
    percent, step = order.progress()
    return OrderDetailResponse(
        **_order_fields(order),
        progress=ProgressResponse(percent=percent, step=step, steps=list(STEP_LABELS)),
        tracking=[tracking_response(entry) for entry in order.history()],
    )


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=list[CartLineResponse])
async def get_cart(user_id: str = Depends(current_user_id)) -> list[CartLineResponse]:
    return [cart_line_response(line, product) for line, product in list_with_products(user_id)]


@cart_router.post("", status_code=201, response_model=CartLineResponse)
async def add_cart_item(body: AddToCartRequest, user_id: str = Depends(current_user_id)) -> CartLineResponse:
    product = get_product(body.product_id)
    ensure_in_stock(product, body.quantity)

    line = add_to_cart(user_id, body.product_id, body.quantity)
    return cart_line_response(line, product)


@cart_router.put("/{item_id}", response_model=CartLineResponse)
async def update_cart_item(
    item_id: str, body: UpdateCartItemRequest, user_id: str = Depends(current_user_id)
) -> CartLineResponse:
    line = update_quantity(user_id, item_id, body.quantity)
    return cart_line_response(line, get_product(line.product_id))


@cart_router.delete("/{item_id}", response_model=StatusResponse)
async def remove_cart_item(item_id: str, user_id: str = Depends(current_user_id)) -> StatusResponse:
    dispatch(RemoveCartItem(user_id=user_id, item_id=item_id))
    return StatusResponse()


@cart_router.delete("", response_model=StatusResponse)
async def clear_cart(user_id: str = Depends(current_user_id)) -> StatusResponse:
    dispatch(ClearCart(user_id=user_id))
    return StatusResponse()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderDetailResponse)
async def create_order(body: PlaceOrderRequest, user_id: str = Depends(current_user_id)) -> OrderDetailResponse:
    """Place an order: validates every line, takes stock, stores the order and empties the cart."""
    order = place_order(
        user_id,
        order_data=body.order_data.model_dump(),
        items=[item.model_dump() for item in body.items],
    )
    return order_detail_response(order)


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(user_id: str = Depends(current_user_id)) -> list[OrderResponse]:
    return [order_response(order) for order in orders_for_user(user_id)]


@order_router.get("/{order_id}", response_model=OrderDetailResponse)
async def order_detail(order_id: str, user_id: str = Depends(current_user_id)) -> OrderDetailResponse:
    return order_detail_response(order_for_user(user_id, order_id))


@order_router.get("/{order_id}/tracking", response_model=list[TrackingEntryResponse])
async def order_tracking(
    order_id: str, latest_first: bool = False, user_id: str = Depends(current_user_id)
) -> list[TrackingEntryResponse]:
    order = order_for_user(user_id, order_id)
    return [tracking_response(entry) for entry in order.history(latest_first=latest_first)]
