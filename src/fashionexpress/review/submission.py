"""SubmitReview — rate a product.

The product's ``ratings``/``num_reviews`` are recomputed in the same unit of
work, so a stored review and the aggregate it feeds never disagree.
"""

from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from fashionexpress.domain import fashionexpress
from fashionexpress.product.queries import get_product
from fashionexpress.product.rating import recompute_rating
from fashionexpress.review.review import Review


@fashionexpress.command(part_of="Review")
class SubmitReview:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)
    comment = Text()


@fashionexpress.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        get_product(command.product_id)

        review = Review.submit(
            user_id=command.user_id,
            product_id=command.product_id,
            rating=command.rating,
            comment=command.comment,
        )
        current_domain.repository_for(Review).add(review)

        recompute_rating(command.product_id)
        return str(review.id)
