"""Product review listing, newest first, with the reviewer's display name."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from fashionexpress.review.review import Review
from fashionexpress.user.user import User


def reviews_for_product(product_id) -> list[tuple[Review, str | None]]:
    reviews = current_domain.repository_for(Review)._dao.query.filter(product_id=str(product_id)).limit(None).all().items
    reviews = sorted(reviews, key=lambda r: r.created_at, reverse=True)

    users = current_domain.repository_for(User)
    names: dict[str, str | None] = {}
    for review in reviews:
        user_id = str(review.user_id)
        if user_id not in names:
            try:
                names[user_id] = users.get(user_id).name
            except ObjectNotFoundError:
                names[user_id] = None

    return [(review, names[str(review.user_id)]) for review in reviews]
