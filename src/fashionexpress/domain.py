"""FashionExpress storefront domain.

One domain holds the catalogue, carts, orders, identity, reviews and
wishlists so that checkout can touch stock, orders and the cart inside a
single unit of work.

Aggregates and their commands, events and handlers live one package below
this file (`fashionexpress/<aggregate>/`); `init()` only discovers elements
in this directory and its immediate subdirectories.
"""

from protean.domain import Domain

from fashionexpress.utils.logging import configure_logging, get_logger

configure_logging(log_file_prefix="fashionexpress")

logger = get_logger(__name__)

fashionexpress = Domain(name="fashionexpress")
