API = "/api/v1"


async def test_data_model_defaults_and_filters(client):
    response = await client.post(f"{API}/data-models", json={"name": "Scope 3 carbon", "type": "carbon"})
    assert response.status_code == 201, response.text
    created = response.json()["data"]
    assert created["source"] == "internal"
    assert created["version"] == "1.0"
    assert created["status"] == "in progress"
    assert created["lastUpdated"] is not None

    await client.post(f"{API}/data-models", json={"name": "Bin camera", "type": "cv", "status": "active"})

    carbon = (await client.get(f"{API}/data-models", params={"type": "carbon"})).json()
    assert [m["name"] for m in carbon["data"]] == ["Scope 3 carbon"]
    active = (await client.get(f"{API}/data-models", params={"status": "active"})).json()
    assert [m["name"] for m in active["data"]] == ["Bin camera"]


async def test_data_model_update_and_unknown_type(client):
    created = (
        await client.post(f"{API}/data-models", json={"name": "LCA", "type": "lca"})
    ).json()["data"]
    updated = await client.put(f"{API}/data-models/{created['id']}", json={"version": "2.0"})
    assert updated.json()["data"]["version"] == "2.0"

    bad = await client.post(f"{API}/data-models", json={"name": "X", "type": "astrology"})
    assert bad.status_code == 422


async def _waste_point(client) -> dict:
    response = await client.post(
        f"{API}/waste-points",
        json={"processStep": "Dock", "wasteType": "Pallets", "estimatedVolume": 3,
              "unit": "pcs", "vendor": "GreenHaul"},
    )
    return response.json()["data"]


async def test_alert_targets_must_exist(client, other_client):
    point = await _waste_point(client)
    rule = {
        "name": "Dock overflow",
        "type": "fill_level",
        "targetType": "waste_point",
        "targetId": point["id"],
        "condition": ">",
        "threshold": "90",
    }

    created = await client.post(f"{API}/alerts", json=rule)
    assert created.status_code == 201, created.text
    assert created.json()["data"]["notificationMethod"] == "In-app"
    assert created.json()["data"]["active"] is True

    foreign = await other_client.post(f"{API}/alerts", json=rule)
    assert foreign.status_code == 404

    missing_sensor = await client.post(
        f"{API}/alerts", json={**rule, "targetType": "sensor", "targetId": "no-such-sensor"}
    )
    assert missing_sensor.status_code == 404


async def test_alert_active_filter(client):
    base = {"name": "Temp", "type": "temperature", "targetType": "sensor", "condition": ">", "threshold": "40"}
    on = (await client.post(f"{API}/alerts", json=base)).json()["data"]
    await client.post(f"{API}/alerts", json={**base, "name": "Muted", "active": False})

    active = (await client.get(f"{API}/alerts", params={"active": "true"})).json()
    assert [a["id"] for a in active["data"]] == [on["id"]]

    paused = await client.put(f"{API}/alerts/{on['id']}", json={"active": False})
    assert paused.json()["data"]["active"] is False
    assert (await client.get(f"{API}/alerts", params={"active": "true"})).json()["data"] == []
