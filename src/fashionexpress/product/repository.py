"""Repository for the Product aggregate."""

from protean.utils.query import Q

from fashionexpress.domain import fashionexpress
from fashionexpress.product.product import Product


@fashionexpress.repository(part_of=Product)
class ProductRepository:
    # `limit(None)` lifts the default page size; it must come last in the chain.
    def everything(self) -> list[Product]:
        return self._dao.query.limit(None).all().items

    def in_category(self, category_id) -> list[Product]:
        return self._dao.query.filter(category_id=str(category_id)).limit(None).all().items

    def featured(self) -> list[Product]:
        return self._dao.query.filter(is_featured=True).limit(None).all().items

    def matching(self, text: str) -> list[Product]:
        """Products whose name, description or brand contains ``text`` (case-insensitive)."""
        criteria = Q(name__icontains=text) | Q(description__icontains=text) | Q(brand__icontains=text)
        return self._dao.query.filter(criteria).limit(None).all().items
