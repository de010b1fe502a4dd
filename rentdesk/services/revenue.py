from decimal import Decimal

from ..models.lease import LEASE_ACTIVE
from ..utils import to_decimal


def compute_revenue(leases):
    """Sum monthly rent over the active leases in ``leases``.

    The caller scopes ``leases`` to one owner. Non-active leases are skipped.
    """
    total = Decimal("0.00")
    breakdown = []
    for lease in leases:
        if lease.status != LEASE_ACTIVE:
            continue
        rent = to_decimal(lease.monthly_rent)
        total += rent
        breakdown.append({
            "lease_id": lease.id,
            "property_name": lease.property.name if lease.property else "Unknown Property",
            "tenant_name": lease.tenant.name if lease.tenant else "Unknown Tenant",
            "monthly_rent": rent,
            "start_date": lease.start_date,
            "end_date": lease.end_date,
        })
    return {
        "total_revenue": total,
        "active_lease_count": len(breakdown),
        "breakdown": breakdown,
    }
