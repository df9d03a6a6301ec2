"""Storefront error taxonomy.

Each error carries the HTTP status the API answers with and a message that
is safe to show to the shopper.
"""


class StorefrontError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StorefrontError):
    status_code = 404


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id):
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


class ForbiddenError(StorefrontError):
    status_code = 403


class UnauthenticatedError(StorefrontError):
    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class InsufficientStockError(StorefrontError):
    def __init__(self, product_id, product_name: str, available: int, requested: int):
        super().__init__(f'Not enough stock for product "{product_name}" (available: {available})')
        self.product_id = product_id
        self.product_name = product_name
        self.available = available
        self.requested = requested


class EmptyOrderError(StorefrontError):
    def __init__(self, message: str = "Order must contain at least one item"):
        super().__init__(message)
