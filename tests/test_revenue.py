from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from rentdesk.services.revenue import compute_revenue


def _lease(lease_id, rent, status="active", property_name="Unit", tenant_name="Tenant"):
    return SimpleNamespace(
        id=lease_id,
        monthly_rent=Decimal(rent),
        status=status,
        property=SimpleNamespace(name=property_name) if property_name else None,
        tenant=SimpleNamespace(name=tenant_name) if tenant_name else None,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
    )


def test_sums_active_leases_only():
    summary = compute_revenue([
        _lease(1, "1500.00"),
        _lease(2, "999.50"),
        _lease(3, "800.00", status="terminated"),
    ])

    assert summary["total_revenue"] == Decimal("2499.50")
    assert str(summary["total_revenue"]) == "2499.50"
    assert summary["active_lease_count"] == 2
    assert [row["lease_id"] for row in summary["breakdown"]] == [1, 2]


def test_no_float_drift():
    summary = compute_revenue([_lease(i, "0.10") for i in range(10)])
    assert summary["total_revenue"] == Decimal("1.00")


def test_empty_input():
    summary = compute_revenue([])
    assert summary == {"total_revenue": Decimal("0.00"), "active_lease_count": 0, "breakdown": []}


def test_missing_relations_fall_back_to_placeholders():
    row = compute_revenue([_lease(1, "10", property_name=None, tenant_name=None)])["breakdown"][0]
    assert row["property_name"] == "Unknown Property"
    assert row["tenant_name"] == "Unknown Tenant"
    assert row["monthly_rent"] == Decimal("10.00")
