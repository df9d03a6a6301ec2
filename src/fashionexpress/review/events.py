"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer

from fashionexpress.domain import fashionexpress


@fashionexpress.event(part_of="Review")
class ReviewSubmitted:
    """A shopper rated a product."""

    __version__ = 1

    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    rating = Integer(required=True)
    submitted_at = DateTime(required=True)

