"""Category aggregate root for grouping products in the storefront."""

from protean.fields import String, Text

from fashionexpress.domain import fashionexpress


@fashionexpress.aggregate
class Category:
    """A top-level shelf in the storefront (Women, Men, Kids, ...)."""

    name: String(required=True, max_length=100)
    image: String(required=True, max_length=500)
    description: Text()

    @classmethod
    def create(cls, name, image, description=None):
        from fashionexpress.category.events import CategoryCreated

        category = cls(name=name, image=image, description=description)
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
            )
        )
        return category
