import logging

from sqlalchemy import or_

from ..clock import today
from ..errors import LeaseConflict, NotFound, ValidationError
from ..models import Lease, Property, Tenant
from ..models.lease import LEASE_ACTIVE, LEASE_EXPIRED
from ..validation import LEASE_FIELDS, LEASE_REQUIRED, apply_patch, parse_payload, parse_pagination
from .base import commit, ordering, paginate
from .lifecycle import DEFAULT_EXPIRING_DAYS, LeaseLifecycle
from .ownership import OwnershipGuard
from .revenue import compute_revenue

logger = logging.getLogger(__name__)

# Ten years; keeps today + days inside the date range
MAX_EXPIRING_DAYS = 3650

SORTABLE = {
    "created_at": Lease.created_at,
    "start_date": Lease.start_date,
    "end_date": Lease.end_date,
    "monthly_rent": Lease.monthly_rent,
    "status": Lease.status,
}


class LeaseService:
    def __init__(self, session, clock=today):
        self.session = session
        self.clock = clock
        self.guard = OwnershipGuard(session)
        self.lifecycle = LeaseLifecycle(session, clock=clock)

    def _check(self, owner_id, values, exclude_lease_id=None, check_tenant=True):
        """Validate the lease as it would look after the write.

        The tenant must belong to the property only when the lease is being
        created or re-pointed at another tenant or property.
        """
        self.guard.get_property(owner_id, values["property_id"], "Property not found or access denied")

        if check_tenant:
            tenant = (
                self.session.query(Tenant)
                .filter(Tenant.id == values["tenant_id"], Tenant.property_id == values["property_id"])
                .first()
            )
            if tenant is None:
                raise NotFound("Tenant not found or not associated with this property")

        if values["start_date"] >= values["end_date"]:
            raise ValidationError("end_date must be after start_date")

        if values["status"] == LEASE_ACTIVE and self.lifecycle.validate_new_active_lease(
            values["property_id"], exclude_lease_id=exclude_lease_id
        ):
            raise LeaseConflict()

    def create(self, owner_id, data):
        fields = parse_payload(data, LEASE_FIELDS, LEASE_REQUIRED)
        fields.setdefault("status", LEASE_ACTIVE)
        self._check(owner_id, fields)

        lease = Lease(**fields)
        self.session.add(lease)
        commit(self.session)
        logger.info("Created lease %s for property %s", lease.id, lease.property_id)
        return lease

    def list(self, owner_id, args):
        limit, offset, sort_by, descending = parse_pagination(args, SORTABLE)
        property_ids = self.guard.property_ids(owner_id)
        if not property_ids:
            return 0, [], limit, offset

        query = (
            self.session.query(Lease)
            .join(Property, Lease.property_id == Property.id)
            .join(Tenant, Lease.tenant_id == Tenant.id)
            .filter(Lease.property_id.in_(property_ids))
        )

        q = (args.get("q") or "").strip()
        if q:
            like = f"%{q}%"
            query = query.filter(or_(Tenant.name.ilike(like), Property.name.ilike(like)))

        status = args.get("status")
        if status:
            query = query.filter(Lease.status == status)

        property_id = args.get("property_id", type=int)
        if property_id:
            query = query.filter(Lease.property_id == property_id)

        tenant_id = args.get("tenant_id", type=int)
        if tenant_id:
            query = query.filter(Lease.tenant_id == tenant_id)

        total, items = paginate(query, limit, offset, ordering(SORTABLE[sort_by], descending, Lease.id))
        return total, items, limit, offset

    def get(self, owner_id, lease_id):
        return self.guard.get_lease(owner_id, lease_id)

    def update(self, owner_id, lease_id, data):
        lease = self.guard.get_lease(owner_id, lease_id)
        patch = parse_payload(data, LEASE_FIELDS)

        resulting = {name: patch.get(name, getattr(lease, name)) for name in LEASE_REQUIRED + ("status",)}
        # Checked before the patch touches the session so autoflush cannot
        # write a half-validated row.
        self._check(
            owner_id,
            resulting,
            exclude_lease_id=lease.id,
            check_tenant="tenant_id" in patch or "property_id" in patch,
        )

        apply_patch(lease, patch)
        commit(self.session)
        return lease

    def delete(self, owner_id, lease_id):
        lease = self.guard.get_lease(owner_id, lease_id)
        self.session.delete(lease)
        commit(self.session)

    def check_expired(self, owner_id):
        """Run the sweep now, then list the caller's expired leases."""
        updated_count = self.lifecycle.sweep_expired_leases()
        property_ids = self.guard.property_ids(owner_id)
        expired = self.lifecycle.store.by_property_ids(property_ids, status=LEASE_EXPIRED)
        return updated_count, expired

    def expiring_soon(self, owner_id, days=DEFAULT_EXPIRING_DAYS):
        if not 0 <= days <= MAX_EXPIRING_DAYS:
            raise ValidationError(f"days must be between 0 and {MAX_EXPIRING_DAYS}")
        property_ids = self.guard.property_ids(owner_id)
        return self.lifecycle.find_expiring_soon(days, property_ids=property_ids)

    def monthly_revenue(self, owner_id, year=None, month=None):
        # year/month are echoed back only; every currently active lease counts.
        now = self.clock()
        year = now.year if year is None else year
        month = now.month if month is None else month
        if not 1 <= year <= 9999:
            raise ValidationError("year must be between 1 and 9999")
        if not 1 <= month <= 12:
            raise ValidationError("month must be between 1 and 12")

        property_ids = self.guard.property_ids(owner_id)
        summary = compute_revenue(self.lifecycle.store.active_leases(property_ids))
        summary.update(year=year, month=month)
        return summary
