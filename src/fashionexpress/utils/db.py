from protean.adapters.repository.sqlalchemy import SADAO
from protean.domain import Domain
from protean.utils.globals import current_domain
from protean.utils.reflection import id_field
from sqlalchemy import create_engine


def _relational_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in ("sqlite", "postgresql"):
            yield provider


def setup_db(domain: Domain):
    """Create tables for every aggregate and entity on a relational provider"""
    with domain.domain_context():
        for provider in _relational_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])

            # Touching the DAO registers the model on the provider metadata
            for _, aggregate_record in domain.registry.aggregates.items():
                if aggregate_record.cls.meta_.provider == provider.name:
                    domain.repository_for(aggregate_record.cls)._dao  # noqa: B018

            for _, entity_record in domain.registry.entities.items():
                if entity_record.cls.meta_.provider == provider.name:
                    domain.repository_for(entity_record.cls)._dao  # noqa: B018

            provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    """Drop all tables"""
    with domain.domain_context():
        for provider in _relational_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)


def lock_rows(aggregate_cls, identifiers) -> None:
    """Hold row locks on ``identifiers`` until the current unit of work ends.

    Issues ``SELECT ... FOR UPDATE`` in id order, so writers that need
    overlapping rows queue up instead of deadlocking. Call it before reading
    the aggregates: rows loaded under the lock are the committed ones. Ids
    without a row are ignored. Stores without row locks (memory) are
    serialized by ``utils.locks.serialized_writes`` instead, so this is a
    no-op there.
    """
    dao = current_domain.repository_for(aggregate_cls)._dao
    if not isinstance(dao, SADAO):
        return

    keys = sorted({str(identifier) for identifier in identifiers})
    if not keys:
        return

    model = dao.database_model_cls
    id_column = getattr(model, id_field(aggregate_cls).attribute_name)
    session = dao._get_session()
    session.query(model).filter(id_column.in_(keys)).order_by(id_column).with_for_update().populate_existing().all()
