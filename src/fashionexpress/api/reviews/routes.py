"""FastAPI routes for product reviews.

Reviews live under their product: ``/products/{product_id}/reviews``.
"""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from fashionexpress.api.identity.dependencies import current_user_id
from fashionexpress.api.reviews.schemas import ReviewResponse, StatusResponse, SubmitReviewRequest
from fashionexpress.product.queries import get_product
from fashionexpress.review.listing import reviews_for_product
from fashionexpress.review.removal import RemoveReview
from fashionexpress.review.review import Review
from fashionexpress.review.submission import SubmitReview
from fashionexpress.shared.commands import dispatch
from fashionexpress.user.user import User

review_router = APIRouter(prefix="/products/{product_id}/reviews", tags=["reviews"])


def review_response(review: Review, user_name: str | None) -> ReviewResponse:
    return ReviewResponse(
        id=str(review.id),
        user_id=str(review.user_id),
        product_id=str(review.product_id),
        rating=review.rating,
        comment=review.comment,
        created_at=review.created_at,
        user_name=user_name,
    )


@review_router.get("", response_model=list[ReviewResponse])
async def list_reviews(product_id: str) -> list[ReviewResponse]:
    """Reviews for a product, newest first."""
    get_product(product_id)
    return [review_response(review, name) for review, name in reviews_for_product(product_id)]


@review_router.post("", status_code=201, response_model=ReviewResponse)
async def submit_review(
    product_id: str, body: SubmitReviewRequest, user_id: str = Depends(current_user_id)
) -> ReviewResponse:
    command = SubmitReview(
        user_id=user_id,
        product_id=product_id,
        rating=body.rating,
        comment=body.comment,
    )
    review_id = dispatch(command)

    review = current_domain.repository_for(Review).get(review_id)
    author = current_domain.repository_for(User).get(user_id)
    return review_response(review, author.name)


@review_router.delete("/{review_id}", response_model=StatusResponse)
async def delete_review(product_id: str, review_id: str, user_id: str = Depends(current_user_id)) -> StatusResponse:
    dispatch(RemoveReview(user_id=user_id, review_id=review_id))
    return StatusResponse()
