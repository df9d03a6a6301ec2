"""Pydantic request/response schemas for the Ordering API.

These are external contracts, kept separate from the internal Protean
commands.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from fashionexpress.api.catalogue.schemas import ProductResponse


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    product_id: str
    quantity: int = Field(default=1, ge=1)


class UpdateCartItemRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    quantity: int = Field(..., ge=1)


class CartLineResponse(BaseModel):
    id: str
    user_id: str
    product_id: str
    quantity: int
    product: ProductResponse


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderDataSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    pincode: str = Field(..., min_length=1, max_length=20)
    phone: str = Field(..., min_length=1, max_length=20)
    payment_method: str = Field(..., min_length=1, max_length=50)


class OrderLineSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    product_id: str
    quantity: int = Field(..., ge=1)


class PlaceOrderRequest(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "order_data": {
                        "address": "12 MG Road",
                        "city": "Bengaluru",
                        "state": "Karnataka",
                        "pincode": "560001",
                        "phone": "9876543210",
                        "payment_method": "cod",
                    },
                    "items": [{"product_id": "<product id>", "quantity": 2}],
                }
            ]
        },
    )

    order_data: OrderDataSchema
    items: list[OrderLineSchema]


class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    quantity: int
    price: float
    product: ProductResponse | None = None


class TrackingEntryResponse(BaseModel):
    id: str
    status: str
    description: str
    timestamp: datetime


class ProgressResponse(BaseModel):
    percent: int
    step: int
    steps: list[str]


class OrderResponse(BaseModel):
    id: str
    user_id: str
    status: str
    total: float
    address: str
    city: str
    state: str
    pincode: str
    phone: str
    payment_method: str
    payment_status: str
    created_at: datetime
    delivery_expected_by: datetime
    items: list[OrderItemResponse]


class OrderDetailResponse(OrderResponse):
    progress: ProgressResponse
    tracking: list[TrackingEntryResponse]


class StatusResponse(BaseModel):
    status: str = "ok"
