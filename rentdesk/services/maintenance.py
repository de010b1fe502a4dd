from sqlalchemy import or_

from ..errors import ValidationError
from ..models import MaintenanceRequest
from ..validation import (
    MAINTENANCE_FIELDS,
    MAINTENANCE_REQUIRED,
    apply_patch,
    parse_payload,
    parse_pagination,
)
from .base import commit, ordering, paginate
from .ownership import OwnershipGuard

SORTABLE = {
    "created_at": MaintenanceRequest.created_at,
    "priority": MaintenanceRequest.priority,
    "status": MaintenanceRequest.status,
    "scheduled_date": MaintenanceRequest.scheduled_date,
}


class MaintenanceService:
    def __init__(self, session):
        self.session = session
        self.guard = OwnershipGuard(session)

    def create(self, owner_id, data):
        fields = parse_payload(data, MAINTENANCE_FIELDS, MAINTENANCE_REQUIRED)
        self.guard.get_property(owner_id, fields["property_id"], "Property not found or access denied")

        record = MaintenanceRequest(**fields)
        self.session.add(record)
        commit(self.session)
        return record

    def list(self, owner_id, args):
        limit, offset, sort_by, descending = parse_pagination(args, SORTABLE)
        property_ids = self.guard.property_ids(owner_id)
        if not property_ids:
            return 0, [], limit, offset

        query = self.session.query(MaintenanceRequest).filter(MaintenanceRequest.property_id.in_(property_ids))

        q = (args.get("q") or "").strip()
        if q:
            like = f"%{q}%"
            query = query.filter(or_(MaintenanceRequest.title.ilike(like), MaintenanceRequest.description.ilike(like)))

        for name in ("status", "priority"):
            value = args.get(name)
            if value:
                query = query.filter(getattr(MaintenanceRequest, name) == value)

        property_id = args.get("property_id", type=int)
        if property_id:
            query = query.filter(MaintenanceRequest.property_id == property_id)

        total, items = paginate(
            query, limit, offset, ordering(SORTABLE[sort_by], descending, MaintenanceRequest.id)
        )
        return total, items, limit, offset

    def get(self, owner_id, request_id):
        return self.guard.get_maintenance(owner_id, request_id)

    def update(self, owner_id, request_id, data):
        record = self.guard.get_maintenance(owner_id, request_id)
        patch = parse_payload(data, MAINTENANCE_FIELDS)

        if "property_id" in patch and patch["property_id"] != record.property_id:
            self.guard.get_property(owner_id, patch["property_id"], "Property not found or access denied")

        scheduled = patch.get("scheduled_date", record.scheduled_date)
        completed = patch.get("completed_date", record.completed_date)
        if scheduled and completed and completed < scheduled:
            raise ValidationError("completed_date must not be before scheduled_date")

        apply_patch(record, patch)
        commit(self.session)
        return record

    def delete(self, owner_id, request_id):
        record = self.guard.get_maintenance(owner_id, request_id)
        self.session.delete(record)
        commit(self.session)
