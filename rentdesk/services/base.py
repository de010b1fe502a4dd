import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import LeaseConflict, StoreFailure

logger = logging.getLogger(__name__)

ACTIVE_LEASE_INDEX = "uq_leases_one_active_per_property"


def _violates_active_lease_index(error):
    msg = str(error.orig)
    # postgres names the index, sqlite names the column
    return ACTIVE_LEASE_INDEX in msg or "leases.property_id" in msg


def commit(session, integrity_error=None):
    """Commit, translating database errors into API errors.

    A hit on the one-active-lease index becomes LeaseConflict; other integrity
    errors become ``integrity_error`` when given, else StoreFailure.
    """
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if _violates_active_lease_index(e):
            raise LeaseConflict() from e
        if integrity_error is not None:
            raise integrity_error from e
        logger.exception("Integrity error on commit")
        raise StoreFailure() from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Database error on commit")
        raise StoreFailure() from e


def paginate(query, limit, offset, order_by):
    """Return (total, items) for a limit/offset page of ``query``."""
    total = query.order_by(None).count()
    items = query.order_by(*order_by).limit(limit).offset(offset).all()
    return total, items


def ordering(column, descending, tiebreak):
    return [column.desc() if descending else column.asc(), tiebreak.desc() if descending else tiebreak.asc()]
