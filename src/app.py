"""FashionExpress ASGI entrypoint.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml:
#   - unset / "test" → in-memory providers
#   - "staging" / "production" → PostgreSQL at DATABASE_URL
from fashionexpress.domain import fashionexpress
from fashionexpress.web import create_app

fashionexpress.init()

app = create_app()
