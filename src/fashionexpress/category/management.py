"""Category management — command, handler and read helpers."""

from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from fashionexpress.category.category import Category
from fashionexpress.domain import fashionexpress


@fashionexpress.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    image: String(required=True, max_length=500)
    description: Text()


@fashionexpress.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(
            name=command.name,
            image=command.image,
            description=command.description,
        )
        current_domain.repository_for(Category).add(category)
        return str(category.id)


def list_categories():
    categories = current_domain.repository_for(Category)._dao.query.limit(None).all().items
    return sorted(categories, key=lambda c: c.name.lower())


def get_category(category_id):
    """Load a category; raises ``ObjectNotFoundError`` when the id is unknown."""
    return current_domain.repository_for(Category).get(category_id)
