from ..errors import NotFound
from ..models import Lease, MaintenanceRequest, Property, Tenant


class OwnershipGuard:
    """Resolves records through Property.owner_id.

    Records that do not exist and records owned by someone else both raise
    NotFound, so callers cannot probe for other owners' ids.
    """

    def __init__(self, session):
        self.session = session

    def property_ids(self, owner_id):
        rows = self.session.query(Property.id).filter(Property.owner_id == owner_id).all()
        return [row.id for row in rows]

    def get_property(self, owner_id, property_id, message="Property not found"):
        prop = (
            self.session.query(Property)
            .filter(Property.id == property_id, Property.owner_id == owner_id)
            .first()
        )
        if prop is None:
            raise NotFound(message)
        return prop

    def get_tenant(self, owner_id, tenant_id):
        return self._scoped(Tenant, owner_id, tenant_id, "Tenant not found")

    def get_lease(self, owner_id, lease_id):
        return self._scoped(Lease, owner_id, lease_id, "Lease not found")

    def get_maintenance(self, owner_id, request_id):
        return self._scoped(MaintenanceRequest, owner_id, request_id, "Maintenance request not found")

    def _scoped(self, model, owner_id, record_id, message):
        record = (
            self.session.query(model)
            .join(Property, model.property_id == Property.id)
            .filter(model.id == record_id, Property.owner_id == owner_id)
            .first()
        )
        if record is None:
            raise NotFound(message)
        return record
