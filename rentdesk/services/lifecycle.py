"""Lease lifecycle: the one-active-lease guard and date-driven expiration."""
import logging

from dateutil.relativedelta import relativedelta
from sqlalchemy.exc import SQLAlchemyError

from ..clock import as_day, today
from ..errors import StoreFailure
from .lease_store import LeaseStore

logger = logging.getLogger(__name__)

DEFAULT_EXPIRING_DAYS = 30


class LeaseLifecycle:
    def __init__(self, session, clock=today, store=None):
        self.session = session
        self.clock = clock
        self.store = store or LeaseStore(session)

    def validate_new_active_lease(self, property_id, exclude_lease_id=None) -> bool:
        """True when another active lease already holds ``property_id``.

        ``exclude_lease_id`` is the lease being updated, so it can be re-saved as
        active without conflicting with itself. Reports, never raises.
        """
        return self.store.find_active(property_id, exclude_id=exclude_lease_id) is not None

    def sweep_expired_leases(self, now=None) -> int:
        """Move every active lease whose end date is before today to expired.

        The end date is the last rentable day, so a lease ending today stays
        active until tomorrow. Returns the number of leases expired; running
        it again right away returns 0.
        """
        day = as_day(now or self.clock())
        try:
            due = [lease.id for lease in self.store.active_leases() if as_day(lease.end_date) < day]
            if not due:
                return 0
            count = self.store.mark_expired(due)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Lease expiration sweep failed")
            raise StoreFailure("Lease expiration sweep failed") from e

        logger.info("Updated %d leases to expired status (end date before %s)", count, day.isoformat())
        return count

    def find_expiring_soon(self, days=DEFAULT_EXPIRING_DAYS, now=None, property_ids=None):
        """Active leases ending within [today, today + days], soonest first."""
        start = as_day(now or self.clock())
        end = start + relativedelta(days=days)
        return self.store.expiring_between(start, end, property_ids=property_ids)
