"""Application tests for cart commands and the cart service."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from fashionexpress.cart.cart import CartItem
from fashionexpress.cart.items import ClearCart, RemoveCartItem, UpdateCartItem
from fashionexpress.cart.repository import CartItemRepository
from fashionexpress.cart.service import add_to_cart, ensure_in_stock, list_with_products, update_quantity
from fashionexpress.shared.errors import ForbiddenError, NotFoundError, StorefrontError


def _lines(user_id):
    return current_domain.repository_for(CartItem).for_user(user_id)


class TestAddToCart:
    def test_first_add_creates_line(self, make_product):
        product_id = make_product()
        line = add_to_cart("user-1", product_id, 2)
        assert line.quantity == 2
        assert len(_lines("user-1")) == 1

    def test_repeated_add_merges_into_one_line(self, make_product):
        product_id = make_product()
        first = add_to_cart("user-1", product_id, 2)
        second = add_to_cart("user-1", product_id, 3)

        assert str(first.id) == str(second.id)
        assert second.quantity == 5
        assert len(_lines("user-1")) == 1

    def test_different_products_are_separate_lines(self, make_product):
        add_to_cart("user-1", make_product(name="Dress"), 1)
        add_to_cart("user-1", make_product(name="Jeans"), 1)
        assert len(_lines("user-1")) == 2

    def test_carts_are_per_user(self, make_product):
        product_id = make_product()
        add_to_cart("user-1", product_id, 1)
        add_to_cart("user-2", product_id, 4)
        assert [line.quantity for line in _lines("user-1")] == [1]
        assert [line.quantity for line in _lines("user-2")] == [4]

    def test_second_insert_of_a_line_is_rejected_by_the_store(self, make_product):
        product_id = make_product()
        repo = current_domain.repository_for(CartItem)
        repo.add(CartItem.create(user_id="user-1", product_id=product_id))

        with pytest.raises(ValidationError) as exc:
            repo.add(CartItem.create(user_id="user-1", product_id=product_id))
        assert "id" in exc.value.messages
        assert len(_lines("user-1")) == 1

    def test_lost_insert_race_merges_into_existing_line(self, make_product, monkeypatch):
        product_id = make_product()
        add_to_cart("user-1", product_id, 2)

        # The first attempt does not see the line, as if it was inserted concurrently
        original = CartItemRepository.find_line
        misses = []

        def find_line(self, user_id, product_id):
            if not misses:
                misses.append(1)
                return None
            return original(self, user_id, product_id)

        monkeypatch.setattr(CartItemRepository, "find_line", find_line)

        line = add_to_cart("user-1", product_id, 3)

        assert misses == [1]
        assert line.quantity == 5
        assert len(_lines("user-1")) == 1

    def test_product_can_be_added_again_after_removal(self, make_product):
        product_id = make_product()
        line = add_to_cart("user-1", product_id, 2)
        current_domain.process(RemoveCartItem(user_id="user-1", item_id=str(line.id)), asynchronous=False)

        again = add_to_cart("user-1", product_id, 1)

        assert str(again.id) == str(line.id)
        assert again.quantity == 1


class TestEnsureInStock:
    def test_within_stock(self, make_product):
        from fashionexpress.product.queries import get_product

        ensure_in_stock(get_product(make_product(stock=3)), 3)

    def test_over_stock(self, make_product):
        from fashionexpress.product.queries import get_product

        with pytest.raises(StorefrontError) as exc:
            ensure_in_stock(get_product(make_product(stock=3)), 4)
        assert exc.value.message == "Not enough stock available"


class TestUpdateCartItem:
    def test_update_quantity(self, make_product):
        line = add_to_cart("user-1", make_product(stock=10), 1)
        updated = update_quantity("user-1", str(line.id), 6)
        assert updated.quantity == 6

    def test_update_over_stock_is_rejected(self, make_product):
        line = add_to_cart("user-1", make_product(stock=5), 1)
        with pytest.raises(StorefrontError):
            update_quantity("user-1", str(line.id), 6)
        assert _lines("user-1")[0].quantity == 1

    def test_update_someone_elses_line(self, make_product):
        line = add_to_cart("user-1", make_product(), 1)
        with pytest.raises(ForbiddenError) as exc:
            current_domain.process(
                UpdateCartItem(user_id="user-2", item_id=str(line.id), quantity=3),
                asynchronous=False,
            )
        assert exc.value.message == "Not authorized to modify this cart item"

    def test_update_unknown_line(self):
        with pytest.raises(NotFoundError):
            update_quantity("user-1", "missing-line", 2)


class TestRemoveAndClear:
    def test_remove_line(self, make_product):
        line = add_to_cart("user-1", make_product(), 1)
        current_domain.process(RemoveCartItem(user_id="user-1", item_id=str(line.id)), asynchronous=False)
        assert _lines("user-1") == []

    def test_remove_someone_elses_line(self, make_product):
        line = add_to_cart("user-1", make_product(), 1)
        with pytest.raises(ForbiddenError):
            current_domain.process(RemoveCartItem(user_id="user-2", item_id=str(line.id)), asynchronous=False)
        assert len(_lines("user-1")) == 1

    def test_clear_only_touches_own_cart(self, make_product):
        dress = make_product(name="Dress")
        jeans = make_product(name="Jeans")
        add_to_cart("user-1", dress, 1)
        add_to_cart("user-1", jeans, 2)
        add_to_cart("user-2", dress, 1)

        cleared = current_domain.process(ClearCart(user_id="user-1"), asynchronous=False)

        assert cleared == 2
        assert _lines("user-1") == []
        assert len(_lines("user-2")) == 1


class TestListWithProducts:
    def test_lines_come_with_products(self, make_product):
        product_id = make_product(name="Leather Jacket")
        add_to_cart("user-1", product_id, 1)

        [(line, product)] = list_with_products("user-1")
        assert str(line.product_id) == product_id
        assert product.name == "Leather Jacket"

    def test_orphaned_lines_are_skipped(self, make_product):
        add_to_cart("user-1", make_product(), 1)
        orphan = CartItem.create(user_id="user-1", product_id="gone-product", quantity=1)
        current_domain.repository_for(CartItem).add(orphan)

        assert len(_lines("user-1")) == 2
        assert len(list_with_products("user-1")) == 1
