"""Access to the ``[custom]`` section of ``domain.toml``."""

from protean.utils.globals import current_domain

_DEFAULTS = {
    "DELIVERY_WINDOW_HOURS": 24,
    "SESSION_TTL_HOURS": 24,
    "SESSION_COOKIE": "fx_session",
}


def setting(name: str, default=None):
    """Return a custom setting for the active domain, falling back to built-in defaults."""
    custom = current_domain.config.get("custom", {}) or {}
    if name in custom:
        return custom[name]
    return _DEFAULTS.get(name, default)
