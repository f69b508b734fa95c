API = "/api/v1"

VENDOR = {
    "name": "GreenHaul Logistics",
    "status": "active",
    "email": "ops@greenhaul.test",
    "services": ["Recycling", "Organics"],
    "rating": 88,
    "onTimeRate": 95,
}


async def _create(client, **overrides):
    response = await client.post(f"{API}/vendors", json={**VENDOR, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_create_then_get_round_trips(client):
    created = await _create(client)
    assert created["services"] == ["Recycling", "Organics"]
    assert created["onTimeRate"] == 95

    fetched = (await client.get(f"{API}/vendors/{created['id']}")).json()["data"]
    assert fetched == created


async def test_default_services(client):
    body = {k: v for k, v in VENDOR.items() if k != "services"}
    response = await client.post(f"{API}/vendors", json=body)
    created = response.json()["data"]
    assert created["services"] == ["General Waste"]


async def test_partial_update_keeps_other_fields(client):
    created = await _create(client)
    response = await client.put(f"{API}/vendors/{created['id']}", json={"rating": 70})
    assert response.status_code == 200
    body = response.json()["data"]
    assert body["rating"] == 70
    assert body["name"] == VENDOR["name"]
    assert body["email"] == VENDOR["email"]


async def test_delete_hides_vendor(client):
    created = await _create(client)
    assert (await client.delete(f"{API}/vendors/{created['id']}")).status_code == 204
    assert (await client.get(f"{API}/vendors/{created['id']}")).status_code == 404
    assert (await client.delete(f"{API}/vendors/{created['id']}")).status_code == 404


async def test_list_filters_and_paginates(client):
    await _create(client, name="Alpha Waste")
    await _create(client, name="Beta Metals", status="pending")
    await _create(client, name="Gamma Paper")

    page = (await client.get(f"{API}/vendors", params={"limit": 2})).json()
    assert len(page["data"]) == 2
    assert page["meta"] == {"total": 3, "page": 1, "limit": 2, "pages": 2}

    active = (await client.get(f"{API}/vendors", params={"status": "active"})).json()
    assert {v["name"] for v in active["data"]} == {"Alpha Waste", "Gamma Paper"}

    found = (await client.get(f"{API}/vendors", params={"search": "metal"})).json()
    assert [v["name"] for v in found["data"]] == ["Beta Metals"]


async def test_other_organizations_cannot_see_vendor(client, other_client):
    created = await _create(client)
    assert (await other_client.get(f"{API}/vendors/{created['id']}")).status_code == 404
    assert (await other_client.get(f"{API}/vendors")).json()["meta"]["total"] == 0


async def test_invalid_rating_is_rejected(client):
    response = await client.post(f"{API}/vendors", json={**VENDOR, "rating": 140})
    assert response.status_code == 422


async def test_contract_end_must_follow_start(client):
    response = await client.post(
        f"{API}/vendors",
        json={**VENDOR, "contractStart": "2026-06-01T00:00:00Z", "contractEnd": "2026-01-01T00:00:00Z"},
    )
    assert response.status_code == 422

    created = await _create(client, contractStart="2026-01-01T00:00:00Z")
    response = await client.put(
        f"{API}/vendors/{created['id']}", json={"contractEnd": "2025-12-31T00:00:00Z"}
    )
    assert response.status_code == 422


async def test_search_treats_wildcards_literally(client):
    await _create(client, name="100% Reclaim")
    await _create(client, name="1000 Bins Ltd")
    await _create(client, name="Bulk_Haul")
    await _create(client, name="BulkXHaul")

    percent = (await client.get(f"{API}/vendors", params={"search": "100%"})).json()
    assert [v["name"] for v in percent["data"]] == ["100% Reclaim"]
    underscore = (await client.get(f"{API}/vendors", params={"search": "k_h"})).json()
    assert [v["name"] for v in underscore["data"]] == ["Bulk_Haul"]
