"""Rating recomputation from the stored reviews of a product."""

import structlog
from protean.utils.globals import current_domain

from fashionexpress.product.product import Product
from fashionexpress.review.review import Review
from fashionexpress.utils.db import lock_rows

logger = structlog.get_logger(__name__)


def average_rating(ratings) -> float:
    """Mean of ``ratings`` rounded to one decimal; 0.0 when there are none."""
    ratings = list(ratings)
    if not ratings:
        return 0.0
    return round(sum(ratings) / len(ratings), 1)


def recompute_rating(product_id) -> Product:
    """Recalculate ``ratings`` and ``num_reviews`` from every review of the product.

    The product row is locked first so concurrent submissions count each
    other's reviews.
    """
    lock_rows(Product, [product_id])
    reviews = current_domain.repository_for(Review)._dao.query.filter(product_id=str(product_id)).limit(None).all().items
    scores = [review.rating for review in reviews]

    repo = current_domain.repository_for(Product)
    product = repo.get(product_id)
    product.record_rating(average_rating(scores), len(scores))
    repo.add(product)

    logger.debug(
        "rating_recomputed",
        product_id=str(product_id),
        ratings=product.ratings,
        num_reviews=product.num_reviews,
    )
    return product
