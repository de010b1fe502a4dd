from sqlalchemy import or_

from ..clock import today
from ..errors import LeaseConflict, PropertyOccupied
from ..models import Tenant
from ..models.lease import LEASE_ACTIVE
from ..models.tenant import TENANT_ACTIVE
from ..validation import TENANT_FIELDS, TENANT_REQUIRED, apply_patch, parse_payload, parse_pagination
from .base import commit, ordering, paginate
from .ownership import OwnershipGuard
from .properties import PropertyService

SORTABLE = {
    "created_at": Tenant.created_at,
    "name": Tenant.name,
    "status": Tenant.status,
}

RENTED_MESSAGE = "Property is already rented. Only available properties can be assigned to tenants."


class TenantService:
    def __init__(self, session, clock=today):
        self.session = session
        self.guard = OwnershipGuard(session)
        self.properties = PropertyService(session, clock=clock)

    def _assignable(self, owner_id, property_id):
        self.guard.get_property(owner_id, property_id, "Property not found or access denied")
        if not self.properties.is_available(property_id):
            raise PropertyOccupied(RENTED_MESSAGE)

    def create(self, owner_id, data):
        fields = parse_payload(data, TENANT_FIELDS, TENANT_REQUIRED)
        fields.setdefault("status", TENANT_ACTIVE)
        self._assignable(owner_id, fields["property_id"])

        tenant = Tenant(**fields)
        self.session.add(tenant)
        commit(self.session)
        return tenant

    def list(self, owner_id, args):
        limit, offset, sort_by, descending = parse_pagination(args, SORTABLE)
        property_ids = self.guard.property_ids(owner_id)
        if not property_ids:
            return 0, [], limit, offset

        query = self.session.query(Tenant).filter(Tenant.property_id.in_(property_ids))

        q = (args.get("q") or "").strip()
        if q:
            like = f"%{q}%"
            query = query.filter(or_(Tenant.name.ilike(like), Tenant.email.ilike(like), Tenant.phone.ilike(like)))

        status = args.get("status")
        if status:
            query = query.filter(Tenant.status == status)

        property_id = args.get("property_id", type=int)
        if property_id:
            query = query.filter(Tenant.property_id == property_id)

        total, items = paginate(query, limit, offset, ordering(SORTABLE[sort_by], descending, Tenant.id))
        return total, items, limit, offset

    def get(self, owner_id, tenant_id):
        return self.guard.get_tenant(owner_id, tenant_id)

    def _has_active_lease(self, tenant):
        return any(lease.status == LEASE_ACTIVE for lease in tenant.leases)

    def update(self, owner_id, tenant_id, data):
        tenant = self.guard.get_tenant(owner_id, tenant_id)
        patch = parse_payload(data, TENANT_FIELDS)

        new_property_id = patch.get("property_id")
        if new_property_id is not None and new_property_id != tenant.property_id:
            if self._has_active_lease(tenant):
                raise LeaseConflict("Tenant has an active lease on their current property")
            self._assignable(owner_id, new_property_id)

        apply_patch(tenant, patch)
        commit(self.session)
        return tenant

    def delete(self, owner_id, tenant_id):
        tenant = self.guard.get_tenant(owner_id, tenant_id)
        if self._has_active_lease(tenant):
            raise LeaseConflict("Tenant has an active lease")
        self.session.delete(tenant)
        commit(self.session)
