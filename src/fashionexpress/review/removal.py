"""RemoveReview — an author deletes their own review."""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from fashionexpress.domain import fashionexpress
from fashionexpress.product.rating import recompute_rating
from fashionexpress.review.review import Review
from fashionexpress.shared.errors import ForbiddenError, NotFoundError


@fashionexpress.command(part_of="Review")
class RemoveReview:
    user_id = Identifier(required=True)
    review_id = Identifier(required=True)


@fashionexpress.command_handler(part_of=Review)
class RemoveReviewHandler:
    @handle(RemoveReview)
    def remove_review(self, command):
        repo = current_domain.repository_for(Review)
        try:
            review = repo.get(command.review_id)
        except ObjectNotFoundError:
            raise NotFoundError("Review not found") from None

        if str(review.user_id) != str(command.user_id):
            raise ForbiddenError("You can only delete your own reviews")

        product_id = str(review.product_id)
        repo._dao.delete(review)

        recompute_rating(product_id)
