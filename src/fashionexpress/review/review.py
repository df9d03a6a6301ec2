"""Review aggregate — a shopper's star rating and comment on a product.

Reviews are write-once: they are created and may be removed by their author,
but never edited. Every change feeds the product's rating aggregate.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, Integer, Text

from fashionexpress.domain import fashionexpress
from fashionexpress.review.events import ReviewSubmitted


@fashionexpress.aggregate
class Review:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)
    comment = Text()
    created_at = DateTime()

    @classmethod
    def submit(cls, user_id, product_id, rating, comment=None):
        now = datetime.now(UTC)
        review = cls(
            user_id=user_id,
            product_id=product_id,
            rating=rating,
            comment=comment,
            created_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                user_id=str(user_id),
                product_id=str(product_id),
                rating=rating,
                submitted_at=now,
            )
        )
        return review

