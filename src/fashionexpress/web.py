"""FashionExpress FastAPI application factory.

Every request runs inside the ``fashionexpress`` domain context so that
handlers can reach repositories through ``current_domain``.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, TransactionError, ValidationError
from protean.integrations.fastapi import register_exception_handlers

from fashionexpress.domain import fashionexpress
from fashionexpress.shared.errors import StorefrontError
from fashionexpress.utils.logging import get_logger

logger = get_logger(__name__)


def _first_message(messages) -> str:
    """Pull the first human-readable message out of a nested error payload."""
    if isinstance(messages, dict):
        for value in messages.values():
            return _first_message(value)
        return "Invalid request"
    if isinstance(messages, (list, tuple)):
        return _first_message(messages[0]) if messages else "Invalid request"
    return str(messages)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def register_storefront_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StorefrontError)
    async def storefront_error(request: Request, exc: StorefrontError):
        logger.info("request_rejected", path=request.url.path, status=exc.status_code, reason=exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return _error(400, _first_message(exc.messages))

    @app.exception_handler(ObjectNotFoundError)
    async def object_not_found(request: Request, exc: ObjectNotFoundError):
        return _error(404, "Not found")

    @app.exception_handler(TransactionError)
    async def transaction_error(request: Request, exc: TransactionError):
        # A unique or primary key constraint lost a race with a concurrent request
        if (exc.extra_info or {}).get("original_exception") == "IntegrityError":
            logger.info("write_conflict", path=request.url.path)
            return _error(400, "Conflicts with an existing record")
        logger.exception("transaction_failed", path=request.url.path)
        return _error(500, "Something went wrong")

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if not errors:
            return _error(400, "Invalid request")
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = first.get("msg", "Invalid request")
        return _error(400, f"{field}: {message}" if field else message)

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("unhandled_error", path=request.url.path)
        return _error(500, "Something went wrong")


def create_app() -> FastAPI:
    app = FastAPI(
        title="FashionExpress API",
        description="Fashion storefront: catalogue, cart, checkout and order tracking",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context for each request."""
        with fashionexpress.domain_context():
            response = await call_next(request)
        return response

    from fashionexpress.api.catalogue import category_router, product_router
    from fashionexpress.api.identity import auth_router, user_router
    from fashionexpress.api.ordering import cart_router, order_router
    from fashionexpress.api.reviews import review_router
    from fashionexpress.api.wishlist import wishlist_router

    app.include_router(user_router)
    app.include_router(auth_router)
    app.include_router(category_router)
    app.include_router(product_router)
    app.include_router(review_router)
    app.include_router(cart_router)
    app.include_router(order_router)
    app.include_router(wishlist_router)

    # Storefront handlers replace Protean's defaults so every error body is {"message": ...}
    register_exception_handlers(app)
    register_storefront_error_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": fashionexpress.name})

    return app
