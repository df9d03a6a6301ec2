"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String

from fashionexpress.domain import fashionexpress


@fashionexpress.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    category_id: Identifier(required=True)
    price: Float(required=True)
    discount_price: Float()
    stock: Integer(required=True)
    created_at: DateTime(required=True)


@fashionexpress.event(part_of="Product")
class ProductDetailsUpdated:
    """Merchandising details (name, pricing, featuring, ...) changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    discount_price: Float()
    is_featured: Boolean()


@fashionexpress.event(part_of="Product")
class StockAdjusted:
    """On-hand stock changed, by checkout or by a restock."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)
    delta: Integer(required=True)


@fashionexpress.event(part_of="Product")
class ProductRatingRecomputed:
    __version__ = 1

    product_id: Identifier(required=True)
    ratings: Float(required=True)
    num_reviews: Integer(required=True)
