"""
Generic CRUD helpers used by the resource modules.
"""

import logging

from flask_login import current_user

from diabetes_api import store
from diabetes_api.errors import NotFoundError

logger = logging.getLogger(__name__)


def get_or_404(model, entity_id, label):
    """Row with primary key ``entity_id`` or a ``<label> not found`` error."""
    with store.store_operation(f'fetching {label.lower()}') as session:
        instance = session.get(model, entity_id)
    if instance is None:
        raise NotFoundError(f'{label} not found')
    return instance


def list_rows(query, label):
    with store.store_operation(f'fetching {label}'):
        return query.all()


def create(model, payload, label, **fixed):
    """Insert a row built from ``fixed`` plus the writable fields in ``payload``."""
    instance = model(**fixed).apply(payload)
    store.save(instance, f'creating {label.lower()}')
    logger.info('%s %s created by %s', label, instance.id, current_user.username)
    return instance


def update(model, entity_id, payload, label):
    instance = get_or_404(model, entity_id, label)
    instance.apply(payload)
    store.commit(f'updating {label.lower()}')
    logger.info('%s %s updated by %s', label, entity_id, current_user.username)
    return instance


def delete(model, entity_id, label):
    instance = get_or_404(model, entity_id, label)
    store.remove(instance, f'deleting {label.lower()}')
    logger.info('%s %s deleted by %s', label, entity_id, current_user.username)
