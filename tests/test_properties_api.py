def _create(client, headers, **overrides):
    payload = {"name": "Villa Rose", "address": "KN 5 Rd", "property_type": "house", "monthly_rent": 1200}
    payload.update(overrides)
    return client.post("/api/properties", json=payload, headers=headers)


def test_create_property(client, auth_headers, owner):
    res = _create(client, auth_headers)
    assert res.status_code == 201
    body = res.get_json()
    assert body["owner_id"] == owner.id
    assert body["status"] == "active"
    assert body["monthly_rent"] == "1200.00"


def test_create_requires_fields(client, auth_headers):
    res = client.post("/api/properties", json={"name": "Only a name"}, headers=auth_headers)
    assert res.status_code == 400
    assert res.get_json() == {"error": "validation_error", "message": "address is required"}


def test_create_rejects_unknown_type(client, auth_headers):
    res = _create(client, auth_headers, property_type="castle")
    assert res.status_code == 400


def test_list_is_scoped_and_paginated(client, auth_headers, owner, other_owner, make_property):
    for i in range(3):
        make_property(owner, name=f"Mine {i}")
    make_property(other_owner, name="Theirs")

    res = client.get("/api/properties?limit=2&sort_by=name&sort_order=asc", headers=auth_headers)
    assert res.status_code == 200
    body = res.get_json()
    assert body["total"] == 3
    assert body["limit"] == 2
    assert [p["name"] for p in body["items"]] == ["Mine 0", "Mine 1"]


def test_list_clamps_limit_and_rejects_bad_sort(client, auth_headers):
    assert client.get("/api/properties?limit=1000", headers=auth_headers).get_json()["limit"] == 100
    assert client.get("/api/properties?sort_by=password", headers=auth_headers).status_code == 400


def test_other_owners_property_is_404(client, auth_headers, other_owner, make_property):
    theirs = make_property(other_owner)
    assert client.get(f"/api/properties/{theirs.id}", headers=auth_headers).status_code == 404
    assert client.delete(f"/api/properties/{theirs.id}", headers=auth_headers).status_code == 404
    assert client.get("/api/properties/9999", headers=auth_headers).status_code == 404


def test_update_ignores_non_whitelisted_fields(client, auth_headers, owner, other_owner, make_property):
    prop = make_property(owner)
    res = client.put(
        f"/api/properties/{prop.id}",
        json={"name": "Renamed", "owner_id": other_owner.id, "id": 999},
        headers=auth_headers,
    )
    assert res.status_code == 200
    body = res.get_json()
    assert body["name"] == "Renamed"
    assert body["owner_id"] == owner.id
    assert body["id"] == prop.id


def test_availability_and_delete_follow_active_lease(
    client, auth_headers, owner, make_property, make_tenant, make_lease, session
):
    prop = make_property(owner)
    lease = make_lease(prop, make_tenant(prop))

    res = client.get(f"/api/properties/{prop.id}/availability", headers=auth_headers)
    body = res.get_json()
    assert body["is_available"] is False
    assert body["current_lease"]["id"] == lease.id

    available = client.get("/api/properties/available", headers=auth_headers).get_json()
    assert available["items"] == []

    res = client.delete(f"/api/properties/{prop.id}", headers=auth_headers)
    assert res.status_code == 409
    assert res.get_json()["error"] == "property_occupied"

    lease.status = "terminated"
    session.commit()

    available = client.get("/api/properties/available", headers=auth_headers).get_json()
    assert [p["id"] for p in available["items"]] == [prop.id]
    assert client.delete(f"/api/properties/{prop.id}", headers=auth_headers).get_json() == {"ok": True}
