"""Synchronous command dispatch.

Every state change in the storefront is a command, and API routes, services
and the operator CLI all send them through ``dispatch``.
"""

from protean.utils.globals import current_domain

from fashionexpress.utils.locks import serialized_writes


def dispatch(command):
    """Process ``command`` in its own unit of work and return the handler's result.

    Version conflicts on aggregates are retried by Protean's handler-level
    version retry (``[server.version_retry]`` in ``domain.toml``).
    """
    with serialized_writes():
        return current_domain.process(command, asynchronous=False)
