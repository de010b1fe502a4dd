from sqlalchemy import or_

from ..clock import today
from ..errors import PropertyOccupied
from ..models import Lease, Property
from ..models.lease import LEASE_ACTIVE
from ..models.property import PROPERTY_ACTIVE
from ..validation import PROPERTY_FIELDS, PROPERTY_REQUIRED, apply_patch, parse_payload, parse_pagination
from .base import commit, ordering, paginate
from .lifecycle import LeaseLifecycle
from .ownership import OwnershipGuard

SORTABLE = {
    "created_at": Property.created_at,
    "name": Property.name,
    "monthly_rent": Property.monthly_rent,
    "status": Property.status,
}


class PropertyService:
    def __init__(self, session, clock=today):
        self.session = session
        self.guard = OwnershipGuard(session)
        self.lifecycle = LeaseLifecycle(session, clock=clock)

    def create(self, owner_id, data):
        fields = parse_payload(data, PROPERTY_FIELDS, PROPERTY_REQUIRED)
        fields.setdefault("status", PROPERTY_ACTIVE)
        prop = Property(owner_id=owner_id, **fields)
        self.session.add(prop)
        commit(self.session)
        return prop

    def list(self, owner_id, args):
        limit, offset, sort_by, descending = parse_pagination(args, SORTABLE)
        query = self.session.query(Property).filter(Property.owner_id == owner_id)

        q = (args.get("q") or "").strip()
        if q:
            like = f"%{q}%"
            query = query.filter(or_(Property.name.ilike(like), Property.address.ilike(like)))

        status = args.get("status")
        if status:
            query = query.filter(Property.status == status)

        property_type = args.get("type")
        if property_type:
            query = query.filter(Property.property_type == property_type)

        total, items = paginate(query, limit, offset, ordering(SORTABLE[sort_by], descending, Property.id))
        return total, items, limit, offset

    def get(self, owner_id, property_id):
        return self.guard.get_property(owner_id, property_id)

    def update(self, owner_id, property_id, data):
        prop = self.guard.get_property(owner_id, property_id)
        apply_patch(prop, parse_payload(data, PROPERTY_FIELDS))
        commit(self.session)
        return prop

    def delete(self, owner_id, property_id):
        prop = self.guard.get_property(owner_id, property_id)
        if not self.is_available(prop.id):
            raise PropertyOccupied("Cannot delete property with active leases")
        self.session.delete(prop)
        commit(self.session)

    def is_available(self, property_id):
        """A property is occupied exactly when it has an active lease."""
        return not self.lifecycle.validate_new_active_lease(property_id)

    def check_availability(self, owner_id, property_id):
        prop = self.guard.get_property(owner_id, property_id)
        current = self.lifecycle.store.find_active(prop.id)
        return {
            "property_id": prop.id,
            "is_available": current is None,
            "current_lease": current.serialize() if current else None,
        }

    def available_properties(self, owner_id):
        rented = self.session.query(Lease.property_id).filter(Lease.status == LEASE_ACTIVE)
        return (
            self.session.query(Property)
            .filter(
                Property.owner_id == owner_id,
                Property.status == PROPERTY_ACTIVE,
                Property.id.notin_(rented),
            )
            .order_by(Property.name.asc(), Property.id.asc())
            .all()
        )
