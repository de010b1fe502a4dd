from datetime import date
from decimal import Decimal

import pytest
from werkzeug.datastructures import MultiDict

from rentdesk.errors import ValidationError
from rentdesk.utils import money, to_decimal
from rentdesk.validation import LEASE_FIELDS, LEASE_REQUIRED, parse_pagination, parse_payload


def test_parse_payload_coerces_and_drops_unknown_keys():
    fields = parse_payload(
        {
            "property_id": "3",
            "tenant_id": 4,
            "start_date": "2024-01-01",
            "end_date": "2024-12-31",
            "monthly_rent": "999.5",
            "id": 77,
            "created_at": "yesterday",
        },
        LEASE_FIELDS,
        LEASE_REQUIRED,
    )
    assert fields == {
        "property_id": 3,
        "tenant_id": 4,
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 12, 31),
        "monthly_rent": Decimal("999.50"),
    }


@pytest.mark.parametrize("data, message", [
    ({}, "property_id is required"),
    ({"property_id": 1, "tenant_id": 1, "start_date": "2024-01-01", "end_date": "2024-12-31",
      "monthly_rent": "-5"}, "monthly_rent must be a non-negative amount"),
    ({"property_id": 1, "tenant_id": 1, "start_date": "2024-01-01", "end_date": "2024-12-31",
      "monthly_rent": "10", "status": "paused"}, "status must be one of active, expired, terminated"),
])
def test_parse_payload_errors(data, message):
    with pytest.raises(ValidationError) as exc:
        parse_payload(data, LEASE_FIELDS, LEASE_REQUIRED)
    assert exc.value.message == message


def test_parse_payload_requires_object():
    with pytest.raises(ValidationError):
        parse_payload(None, LEASE_FIELDS)


def test_pagination_defaults_and_clamps():
    sortable = {"created_at": None, "name": None}
    assert parse_pagination(MultiDict(), sortable) == (10, 0, "created_at", True)
    assert parse_pagination(MultiDict({"limit": "0", "offset": "-4", "sort_order": "ASC"}), sortable) == (
        1, 0, "created_at", False,
    )
    with pytest.raises(ValidationError):
        parse_pagination(MultiDict({"limit": "ten"}), sortable)


def test_money_helpers():
    assert to_decimal(0.1) + to_decimal(0.2) == Decimal("0.30")
    assert money(Decimal("1500")) == "1500.00"
    assert money(None) is None
    with pytest.raises(ValueError):
        to_decimal("abc")
