"""Concurrent checkouts and cart adds against shared rows.

Each worker thread pushes its own domain context, the way a request does.
"""

from concurrent.futures import ThreadPoolExecutor

from protean import current_domain

from fashionexpress.cart.cart import CartItem
from fashionexpress.cart.service import add_to_cart
from fashionexpress.domain import fashionexpress
from fashionexpress.order.order import Order
from fashionexpress.order.placement import place_order
from fashionexpress.product.stock import restock
from fashionexpress.shared.errors import InsufficientStockError


def _run_concurrently(worker, count):
    with ThreadPoolExecutor(max_workers=count) as pool:
        return list(pool.map(worker, range(count)))


class TestConcurrentCheckout:
    def test_stock_is_never_oversold(self, make_product, order_data, stock_of):
        product_id = make_product(stock=5)

        def buy(n):
            with fashionexpress.domain_context():
                try:
                    place_order(f"user-{n}", order_data, [{"product_id": product_id, "quantity": 1}])
                    return "ok"
                except InsufficientStockError:
                    return "sold out"

        outcomes = _run_concurrently(buy, 12)

        assert outcomes.count("ok") == 5
        assert outcomes.count("sold out") == 7
        assert stock_of(product_id) == 0
        assert len(current_domain.repository_for(Order)._dao.query.limit(None).all().items) == 5

    def test_overlapping_baskets_do_not_deadlock(self, make_product, order_data, stock_of):
        a = make_product(name="A", stock=20)
        b = make_product(name="B", stock=20)

        def buy(n):
            # Half the workers list the products in reverse order
            lines = [{"product_id": a, "quantity": 1}, {"product_id": b, "quantity": 1}]
            if n % 2:
                lines.reverse()
            with fashionexpress.domain_context():
                place_order(f"user-{n}", order_data, lines)

        _run_concurrently(buy, 8)

        assert (stock_of(a), stock_of(b)) == (12, 12)


class TestConcurrentCartAdds:
    def test_same_product_merges_into_one_line(self, make_product):
        product_id = make_product(stock=100)

        def add(n):
            with fashionexpress.domain_context():
                add_to_cart("user-1", product_id, 1)

        _run_concurrently(add, 10)

        lines = current_domain.repository_for(CartItem).for_user("user-1")
        assert len(lines) == 1
        assert lines[0].quantity == 10

    def test_different_shoppers_each_keep_their_line(self, make_product):
        product_id = make_product(stock=100)

        def add(n):
            with fashionexpress.domain_context():
                add_to_cart(f"user-{n}", product_id, 1)

        _run_concurrently(add, 40)

        repo = current_domain.repository_for(CartItem)
        assert all(len(repo.for_user(f"user-{n}")) == 1 for n in range(40))
        assert len(repo._dao.query.filter(product_id=product_id).limit(None).all().items) == 40


class TestConcurrentWritesOnDifferentRows:
    def test_checkouts_of_different_products_all_land(self, make_product, order_data, stock_of):
        products = [make_product(name=f"Item {n}", stock=5) for n in range(20)]

        def buy(n):
            with fashionexpress.domain_context():
                return str(place_order(f"user-{n}", order_data, [{"product_id": products[n], "quantity": 1}]).id)

        order_ids = _run_concurrently(buy, 20)

        repo = current_domain.repository_for(Order)
        assert len(set(order_ids)) == 20
        assert len(repo._dao.query.limit(None).all().items) == 20
        assert [stock_of(product_id) for product_id in products] == [4] * 20

    def test_restocks_and_cart_adds_interleave(self, make_product, stock_of):
        products = [make_product(name=f"Item {n}", stock=1) for n in range(10)]

        def work(n):
            with fashionexpress.domain_context():
                if n % 2:
                    add_to_cart(f"user-{n}", products[n // 2], 1)
                else:
                    restock(products[n // 2], 3)

        _run_concurrently(work, 20)

        assert [stock_of(product_id) for product_id in products] == [4] * 10
        repo = current_domain.repository_for(CartItem)
        assert sum(len(repo.for_user(f"user-{n}")) for n in range(1, 20, 2)) == 10
