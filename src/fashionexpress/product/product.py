"""Product aggregate root: a sellable item with price, stock and rating."""

from datetime import UTC, datetime

import structlog
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from fashionexpress.domain import fashionexpress
from fashionexpress.product.events import (
    ProductCreated,
    ProductDetailsUpdated,
    ProductRatingRecomputed,
    StockAdjusted,
)

logger = structlog.get_logger(__name__)

# Fields a merchandiser may change after creation. Stock and ratings have
# their own operations.
_EDITABLE_FIELDS = (
    "name",
    "description",
    "price",
    "discount_price",
    "image",
    "category_id",
    "brand",
    "is_featured",
)


@fashionexpress.aggregate
class Product:
    """A catalogue item.

    ``stock`` never goes below zero. ``discount_price``, when set, is the
    price a shopper actually pays; it is stored as-is even when it exceeds
    ``price``.
    """

    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True, min_value=0.01)
    discount_price: Float(min_value=0.01)
    stock: Integer(required=True, min_value=0, default=0)
    image: String(required=True, max_length=500)
    category_id: Identifier(required=True)
    brand: String(required=True, max_length=100)
    ratings: Float(default=0.0, min_value=0.0, max_value=5.0)
    num_reviews: Integer(default=0, min_value=0)
    is_featured: Boolean(default=False)
    created_at: DateTime()

    @classmethod
    def create(
        cls,
        name,
        description,
        price,
        image,
        category_id,
        brand,
        stock=0,
        discount_price=None,
        is_featured=False,
    ):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            discount_price=discount_price,
            stock=stock,
            image=image,
            category_id=category_id,
            brand=brand,
            is_featured=is_featured,
            created_at=now,
        )
        product._warn_on_inverted_discount()
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                category_id=category_id,
                price=price,
                discount_price=discount_price,
                stock=stock,
                created_at=now,
            )
        )
        return product

    @property
    def unit_price(self) -> float:
        """Price charged per unit at checkout."""
        return self.discount_price if self.discount_price is not None else self.price

    def update_details(self, **changes):
        unknown = set(changes) - set(_EDITABLE_FIELDS)
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in sorted(unknown)})

        for field, value in changes.items():
            setattr(self, field, value)

        self._warn_on_inverted_discount()
        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                discount_price=self.discount_price,
                is_featured=self.is_featured,
            )
        )

    def adjust_stock(self, delta: int):
        """Add ``delta`` (negative to take stock) to the on-hand quantity."""
        new_stock = self.stock + delta
        if new_stock < 0:
            raise ValidationError(
                {"stock": [f"Stock for product {self.id} cannot go below zero (on hand {self.stock}, change {delta})"]}
            )

        previous = self.stock
        self.stock = new_stock
        self.raise_(
            StockAdjusted(
                product_id=self.id,
                previous_stock=previous,
                new_stock=new_stock,
                delta=delta,
            )
        )

    def record_rating(self, ratings: float, num_reviews: int):
        self.ratings = ratings
        self.num_reviews = num_reviews
        self.raise_(
            ProductRatingRecomputed(
                product_id=self.id,
                ratings=ratings,
                num_reviews=num_reviews,
            )
        )

    def _warn_on_inverted_discount(self):
        if self.discount_price is not None and self.discount_price > self.price:
            logger.warning(
                "discount_price_above_price",
                product_id=str(self.id),
                price=self.price,
                discount_price=self.discount_price,
            )
