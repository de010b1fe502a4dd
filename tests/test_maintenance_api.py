def _payload(prop, **overrides):
    payload = {"title": "Leaking tap", "description": "Kitchen tap drips", "property_id": prop.id}
    payload.update(overrides)
    return payload


def test_create_with_defaults(client, auth_headers, owner, make_property):
    prop = make_property(owner)
    res = client.post("/api/maintenance", json=_payload(prop, cost=45.5), headers=auth_headers)
    assert res.status_code == 201
    body = res.get_json()
    assert body["status"] == "pending"
    assert body["priority"] == "medium"
    assert body["cost"] == "45.50"


def test_rejects_bad_priority_and_foreign_property(client, auth_headers, other_owner, owner, make_property):
    mine = make_property(owner)
    theirs = make_property(other_owner)

    assert client.post("/api/maintenance", json=_payload(mine, priority="asap"), headers=auth_headers).status_code == 400
    assert client.post("/api/maintenance", json=_payload(theirs), headers=auth_headers).status_code == 404


def test_update_list_and_delete(client, auth_headers, owner, make_property):
    prop = make_property(owner)
    created = client.post("/api/maintenance", json=_payload(prop), headers=auth_headers).get_json()

    res = client.put(
        f"/api/maintenance/{created['id']}",
        json={"status": "completed", "scheduled_date": "2024-05-01", "completed_date": "2024-05-03"},
        headers=auth_headers,
    )
    assert res.status_code == 200
    assert res.get_json()["completed_date"] == "2024-05-03"

    backwards = client.put(
        f"/api/maintenance/{created['id']}", json={"completed_date": "2024-04-01"}, headers=auth_headers
    )
    assert backwards.status_code == 400

    listing = client.get("/api/maintenance?status=completed", headers=auth_headers).get_json()
    assert listing["total"] == 1

    assert client.delete(f"/api/maintenance/{created['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/maintenance/{created['id']}", headers=auth_headers).status_code == 404
