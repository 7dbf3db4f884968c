"""
Store Access

Every database call from a request handler runs inside ``store_operation``,
which rolls the session back and re-raises SQLAlchemy failures as
``StoreError``. The session itself is removed by Flask-SQLAlchemy at request
teardown, returning the pooled connection on every exit path.
"""

import logging
from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from diabetes_api.errors import StoreError
from diabetes_api.extensions import db

logger = logging.getLogger(__name__)


def describe_store_error(error):
    """Short driver message for a SQLAlchemy error."""
    orig = getattr(error, 'orig', None)
    return str(orig) if orig is not None else str(error)


@contextmanager
def store_operation(context):
    """Wrap a unit of store work; ``context`` names it in the log."""
    try:
        yield db.session
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Error %s', context)
        raise StoreError(f'Database error: {describe_store_error(e)}', cause=e) from e


def save(instance, context):
    """Add ``instance`` and commit."""
    with store_operation(context) as session:
        session.add(instance)
        session.commit()
    return instance


def remove(instance, context):
    with store_operation(context) as session:
        session.delete(instance)
        session.commit()


def commit(context):
    with store_operation(context) as session:
        session.commit()


def ping():
    """Run a trivial query; used by the connectivity probe."""
    with store_operation('probing database') as session:
        rows = session.execute(text('SELECT 1 AS test')).mappings().all()
    return [dict(row) for row in rows]
