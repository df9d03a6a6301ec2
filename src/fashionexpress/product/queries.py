"""Read side of the catalogue: product lookup and filtered listings.

Listings support exactly one filter at a time. When several are supplied
the first present one wins, in the order category, search, featured.
"""

from dataclasses import dataclass
from enum import Enum

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from fashionexpress.product.product import Product
from fashionexpress.shared.errors import ProductNotFoundError


class QueryMode(Enum):
    ALL = "all"
    BY_CATEGORY = "by_category"
    BY_SEARCH = "by_search"
    FEATURED = "featured"


@dataclass(frozen=True)
class ProductQuery:
    mode: QueryMode = QueryMode.ALL
    category_id: str | None = None
    text: str | None = None

    @classmethod
    def from_params(cls, category: str | None = None, search: str | None = None, featured: bool = False):
        if category:
            return cls(mode=QueryMode.BY_CATEGORY, category_id=category)
        if search:
            return cls(mode=QueryMode.BY_SEARCH, text=search)
        if featured:
            return cls(mode=QueryMode.FEATURED)
        return cls()


def get_product(product_id) -> Product:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise ProductNotFoundError(product_id) from None


def find_product(product_id) -> Product | None:
    """Like ``get_product`` but returns None for unknown ids."""
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        return None


def list_products(query: ProductQuery | None = None) -> list[Product]:
    query = query or ProductQuery()
    repo = current_domain.repository_for(Product)

    if query.mode is QueryMode.BY_CATEGORY:
        products = repo.in_category(query.category_id)
    elif query.mode is QueryMode.BY_SEARCH:
        products = repo.matching(query.text)
    elif query.mode is QueryMode.FEATURED:
        products = repo.featured()
    else:
        products = repo.everything()

    return products
