"""Product creation — command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from fashionexpress.category.category import Category
from fashionexpress.domain import fashionexpress
from fashionexpress.product.product import Product


@fashionexpress.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True, min_value=0.01)
    discount_price: Float(min_value=0.01)
    stock: Integer(default=0, min_value=0)
    image: String(required=True, max_length=500)
    category_id: Identifier(required=True)
    brand: String(required=True, max_length=100)
    is_featured: Boolean(default=False)


@fashionexpress.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        # Unknown categories surface as ObjectNotFoundError
        current_domain.repository_for(Category).get(command.category_id)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            discount_price=command.discount_price,
            stock=command.stock,
            image=command.image,
            category_id=command.category_id,
            brand=command.brand,
            is_featured=command.is_featured,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
