API = "/api/v1"


def _payload(step: str, **overrides) -> dict:
    return {
        "processStep": step,
        "wasteType": "Cardboard",
        "estimatedVolume": 120,
        "unit": "kg",
        "vendor": "GreenHaul Logistics",
        **overrides,
    }


async def _create(client, step: str, **overrides) -> dict:
    response = await client.post(f"{API}/waste-points", json=_payload(step, **overrides))
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_create_with_location(client):
    created = await _create(
        client,
        "Packaging line",
        locationData={"address": "1 Dock Rd", "lat": 51.5, "lng": -0.12, "placeId": "abc123"},
    )
    assert created["interval"] == "weekly"
    assert created["locationData"] == {
        "address": "1 Dock Rd", "lat": 51.5, "lng": -0.12, "placeId": "abc123",
    }


async def test_ids_filter_returns_exact_subset(client):
    a = await _create(client, "Receiving")
    await _create(client, "Assembly")
    c = await _create(client, "Shipping")

    response = await client.get(f"{API}/waste-points", params={"ids": f"{a['id']}, {c['id']},"})
    body = response.json()
    assert {w["id"] for w in body["data"]} == {a["id"], c["id"]}
    assert body["meta"]["total"] == 2

    everything = (await client.get(f"{API}/waste-points")).json()
    assert everything["meta"]["total"] == 3


async def test_ids_filter_ignores_other_tenants(client, other_client):
    mine = await _create(client, "Receiving")
    response = await other_client.get(f"{API}/waste-points", params={"ids": mine["id"]})
    assert response.json()["data"] == []


async def test_linked_device_must_belong_to_org(client, other_client):
    device = (
        await other_client.post(f"{API}/devices", json={"name": "Theirs", "type": "scale"})
    ).json()["data"]

    response = await client.post(f"{API}/waste-points", json=_payload("Receiving", deviceId=device["id"]))
    assert response.status_code == 404

    own = (await client.post(f"{API}/devices", json={"name": "Ours", "type": "scale"})).json()["data"]
    created = await _create(client, "Receiving", deviceId=own["id"])
    assert created["deviceId"] == own["id"]


async def test_update_and_delete(client):
    created = await _create(client, "Receiving")
    response = await client.put(
        f"{API}/waste-points/{created['id']}", json={"interval": "daily", "estimatedVolume": 80}
    )
    assert response.status_code == 200
    body = response.json()["data"]
    assert body["interval"] == "daily"
    assert body["estimatedVolume"] == 80
    assert body["wasteType"] == "Cardboard"

    assert (await client.delete(f"{API}/waste-points/{created['id']}")).status_code == 204
    assert (await client.get(f"{API}/waste-points/{created['id']}")).status_code == 404


async def test_unknown_interval_is_rejected(client):
    response = await client.post(f"{API}/waste-points", json=_payload("Receiving", interval="hourly"))
    assert response.status_code == 422


async def test_device_link_can_be_cleared(client):
    device = (await client.post(f"{API}/devices", json={"name": "Ours", "type": "scale"})).json()["data"]
    created = await _create(client, "Receiving", deviceId=device["id"], notes="Dock 2")

    response = await client.put(f"{API}/waste-points/{created['id']}", json={"deviceId": None})
    assert response.status_code == 200, response.text
    body = response.json()["data"]
    assert body["deviceId"] is None
    assert body["notes"] == "Dock 2"

    fetched = (await client.get(f"{API}/waste-points/{created['id']}")).json()["data"]
    assert fetched["deviceId"] is None


async def test_null_for_required_field_leaves_it_unchanged(client):
    created = await _create(client, "Receiving")
    response = await client.put(f"{API}/waste-points/{created['id']}", json={"vendor": None})
    assert response.status_code == 200
    assert response.json()["data"]["vendor"] == "GreenHaul Logistics"
