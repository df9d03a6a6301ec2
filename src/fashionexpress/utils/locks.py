"""Write serialization for the in-memory store.

A unit of work on Protean's memory provider runs against a private copy of
the whole store and swaps that copy in when it commits. Two units of work
that overlap in time therefore lose each other's writes whatever rows they
touch, and version checks cannot catch it because they compare against the
private copy. On the memory store, units of work run one at a time.

Relational stores take no lock here: conflicting writers meet at the
database (row locks from ``utils.db.lock_rows``, unique constraints and
aggregate version checks).
"""

from contextlib import nullcontext
from threading import RLock

from protean.utils.globals import current_domain

_memory_store_lock = RLock()


def uses_memory_store() -> bool:
    return current_domain.config["databases"]["default"]["provider"] == "memory"


def serialized_writes():
    """Context manager guarding one unit of work against concurrent ones."""
    if uses_memory_store():
        return _memory_store_lock
    return nullcontext()
