"""Product detail updates — command and handler.

Only the fields present on the command are changed.
"""

from protean import handle
from protean.fields import Boolean, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from fashionexpress.domain import fashionexpress
from fashionexpress.product.product import Product


@fashionexpress.command(part_of="Product")
class UpdateProductDetails:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Float(min_value=0.01)
    discount_price: Float(min_value=0.01)
    image: String(max_length=500)
    category_id: Identifier()
    brand: String(max_length=100)
    is_featured: Boolean()


@fashionexpress.command_handler(part_of=Product)
class UpdateProductDetailsHandler:
    @handle(UpdateProductDetails)
    def update_details(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        changes = {
            field: getattr(command, field)
            for field in (
                "name",
                "description",
                "price",
                "discount_price",
                "image",
                "category_id",
                "brand",
                "is_featured",
            )
            if getattr(command, field) is not None
        }
        product.update_details(**changes)
        repo.add(product)
