"""FastAPI routes for browsing the catalogue."""

from fastapi import APIRouter

from fashionexpress.api.catalogue.schemas import CategoryResponse, ProductResponse
from fashionexpress.category.category import Category
from fashionexpress.category.management import get_category, list_categories
from fashionexpress.product.product import Product
from fashionexpress.product.queries import ProductQuery, get_product, list_products

category_router = APIRouter(prefix="/categories", tags=["categories"])
product_router = APIRouter(prefix="/products", tags=["products"])


def category_response(category: Category) -> CategoryResponse:
    return CategoryResponse(
        id=str(category.id),
        name=category.name,
        image=category.image,
        description=category.description,
    )


def product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        discount_price=product.discount_price,
        stock=product.stock,
        image=product.image,
        category_id=str(product.category_id),
        brand=product.brand,
        ratings=product.ratings or 0.0,
        num_reviews=product.num_reviews or 0,
        is_featured=bool(product.is_featured),
        created_at=product.created_at,
    )


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------
@category_router.get("", response_model=list[CategoryResponse])
async def categories() -> list[CategoryResponse]:
    return [category_response(category) for category in list_categories()]


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def category_detail(category_id: str) -> CategoryResponse:
    return category_response(get_category(category_id))


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
@product_router.get("", response_model=list[ProductResponse])
async def products(
    category: str | None = None,
    search: str | None = None,
    featured: bool = False,
) -> list[ProductResponse]:
    """List products filtered by one of category, search or featured (in that precedence)."""
    query = ProductQuery.from_params(category=category, search=search, featured=featured)
    return [product_response(product) for product in list_products(query)]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def product_detail(product_id: str) -> ProductResponse:
    return product_response(get_product(product_id))
