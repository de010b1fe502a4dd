from datetime import datetime

from ..models import Lease
from ..models.lease import LEASE_ACTIVE, LEASE_EXPIRED


class LeaseStore:
    """Query primitives over Lease rows, bound to one SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    def find_active(self, property_id, exclude_id=None):
        query = self.session.query(Lease).filter(
            Lease.property_id == property_id,
            Lease.status == LEASE_ACTIVE,
        )
        if exclude_id is not None:
            query = query.filter(Lease.id != exclude_id)
        return query.first()

    def active_leases(self, property_ids=None):
        query = self.session.query(Lease).filter(Lease.status == LEASE_ACTIVE)
        if property_ids is not None:
            if not property_ids:
                return []
            query = query.filter(Lease.property_id.in_(property_ids))
        return query.order_by(Lease.id).all()

    def mark_expired(self, ids):
        """Bulk active -> expired for ``ids``; returns rows changed. Does not commit."""
        if not ids:
            return 0
        return (
            self.session.query(Lease)
            .filter(Lease.id.in_(ids), Lease.status == LEASE_ACTIVE)
            .update(
                {Lease.status: LEASE_EXPIRED, Lease.updated_at: datetime.utcnow()},
                synchronize_session="fetch",
            )
        )

    def expiring_between(self, start, end, property_ids=None):
        query = self.session.query(Lease).filter(
            Lease.status == LEASE_ACTIVE,
            Lease.end_date >= start,
            Lease.end_date <= end,
        )
        if property_ids is not None:
            if not property_ids:
                return []
            query = query.filter(Lease.property_id.in_(property_ids))
        return query.order_by(Lease.end_date.asc(), Lease.id.asc()).all()

    def by_property_ids(self, property_ids, status=None):
        if not property_ids:
            return []
        query = self.session.query(Lease).filter(Lease.property_id.in_(property_ids))
        if status:
            query = query.filter(Lease.status == status)
        return query.order_by(Lease.end_date.desc(), Lease.id.desc()).all()
