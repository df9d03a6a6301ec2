"""Starter catalogue for a fresh storefront.

Seeding is skipped when any product already exists. Ratings start at zero
and are filled in as shoppers leave reviews.
"""

from protean.utils.globals import current_domain

from fashionexpress.category.management import CreateCategory
from fashionexpress.product.creation import CreateProduct
from fashionexpress.product.product import Product
from fashionexpress.shared.commands import dispatch
from fashionexpress.utils.logging import get_logger

logger = get_logger(__name__)

_UNSPLASH = "https://images.unsplash.com/photo-{}?w=800&auto=format&fit=crop&q=60"

CATEGORIES = [
    ("Women", "1567401893414-76b7b1e5a7a5", "Women's fashion collection including dresses, tops, and accessories"),
    ("Men", "1617137968427-85924c800a22", "Men's clothing including shirts, suits, and casual wear"),
    ("Kids", "1622290291468-a28f7a7dc6a8", "Children's clothing for all ages"),
    ("Accessories", "1584184874310-80a0e9a33649", "Fashion accessories including bags, jewelry, and more"),
    ("Footwear", "1515955656352-a1fa3ffcd111", "Footwear for all occasions"),
    ("Ethnic", "1610713587134-45dc21cfa08f", "Traditional and ethnic clothing"),
    ("Sports", "1519482816300-1490fdf2c2bd", "Sportswear and athletic clothing"),
    ("Winter", "1516431883659-655d4b6bcad4", "Winter clothing and accessories"),
]

# (category, name, description, price, discount_price, brand, stock, image, featured)
PRODUCTS = [
    (
        "Women",
        "Summer Floral Dress",
        "Beautiful floral print summer dress, perfect for casual outings.",
        49.99,
        39.99,
        "StyleVista",
        50,
        "1612336307429-8a898d10e223",
        True,
    ),
    (
        "Women",
        "Elegant Evening Gown",
        "Stunning evening gown for special occasions, featuring delicate embroidery.",
        129.99,
        99.99,
        "Glamour",
        25,
        "1566174053879-31528523f8ae",
        True,
    ),
    (
        "Women",
        "Classic Denim Jeans",
        "Comfortable high-waisted denim jeans with a classic fit.",
        59.99,
        None,
        "DenimLife",
        100,
        "1475178626620-a4d074967452",
        False,
    ),
    (
        "Women",
        "Bohemian Maxi Skirt",
        "Flowing maxi skirt with bohemian print, ideal for summer.",
        44.99,
        None,
        "BohoStyle",
        60,
        "1583496661160-fb5886a0aaaa",
        True,
    ),
    (
        "Men",
        "Formal Business Suit",
        "Classic tailored suit for professional settings, made from high-quality wool blend.",
        249.99,
        199.99,
        "Executive",
        35,
        "1594938298603-c8148c4dae35",
        True,
    ),
    (
        "Men",
        "Casual Button-Down Shirt",
        "Comfortable cotton button-down shirt, perfect for casual or semi-formal occasions.",
        39.99,
        32.99,
        "Casual Style",
        85,
        "1563630423918-b58f07336ac9",
        False,
    ),
    (
        "Men",
        "Slim Fit Jeans",
        "Modern slim fit jeans with stretch for comfort and mobility.",
        54.99,
        None,
        "DenimLife",
        120,
        "1604176424472-9d9656bdb13a",
        True,
    ),
    (
        "Men",
        "Leather Jacket",
        "Stylish leather jacket with quilted lining for extra warmth.",
        179.99,
        149.99,
        "UrbanEdge",
        30,
        "1521223890158-f9f7c3d5d504",
        True,
    ),
]


def seed_catalogue() -> int:
    """Create the starter categories and products; returns the number of products created."""
    if current_domain.repository_for(Product)._dao.query.limit(1).all().items:
        logger.info("seed_skipped", reason="products already exist")
        return 0

    category_ids = {}
    for name, photo, description in CATEGORIES:
        category_ids[name] = dispatch(
            CreateCategory(name=name, image=_UNSPLASH.format(photo), description=description)
        )

    for category, name, description, price, discount_price, brand, stock, photo, featured in PRODUCTS:
        dispatch(
            CreateProduct(
                name=name,
                description=description,
                price=price,
                discount_price=discount_price,
                stock=stock,
                image=_UNSPLASH.format(photo),
                category_id=category_ids[category],
                brand=brand,
                is_featured=featured,
            )
        )

    logger.info("catalogue_seeded", categories=len(CATEGORIES), products=len(PRODUCTS))
    return len(PRODUCTS)
