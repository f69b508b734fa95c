from datetime import datetime, timedelta, timezone

from app.services import device as device_service

API = "/api/v1"


async def _device(client, **overrides):
    response = await client.post(
        f"{API}/devices", json={"name": "Bin 7 sensor", "type": "fill-level", **overrides}
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def _sensor(client, device_id, sensor_type="fill_level"):
    response = await client.post(
        f"{API}/sensors",
        json={"deviceId": device_id, "name": "Ultrasonic", "sensorType": sensor_type, "unit": "%"},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_device_token_is_only_returned_on_create(client):
    created = await _device(client)
    assert created["deviceToken"]
    assert len(created["deviceId"]) == 8
    assert created["iotStatus"] == "disconnected"

    fetched = (await client.get(f"{API}/devices/{created['id']}")).json()["data"]
    assert "deviceToken" not in fetched
    listed = (await client.get(f"{API}/devices")).json()["data"]
    assert "deviceToken" not in listed[0]


async def test_access_codes_are_unique(client, other_client):
    await _device(client, deviceId="BIN-0001")
    response = await other_client.post(
        f"{API}/devices", json={"name": "Copy", "type": "fill-level", "deviceId": "BIN-0001"}
    )
    assert response.status_code == 409


async def test_recorded_reading_updates_device(client):
    device = await _device(client)
    sensor = await _sensor(client, device["id"])

    response = await client.post(
        f"{API}/devices/{device['id']}/readings",
        json={"sensorId": sensor["id"], "fillLevel": 72.5, "batteryLevel": 81},
    )
    assert response.status_code == 201, response.text

    updated = (await client.get(f"{API}/devices/{device['id']}")).json()["data"]
    assert updated["iotStatus"] == "connected"
    assert updated["lastReading"] == 72.5
    assert updated["lastReadingUnit"] == "%"
    assert updated["batteryLevel"] == 81
    assert updated["lastConnected"] is not None

    readings = (await client.get(f"{API}/devices/{device['id']}/readings")).json()["data"]
    assert [r["fillLevel"] for r in readings] == [72.5]


async def test_readings_window(client):
    device = await _device(client)
    await client.post(
        f"{API}/devices/{device['id']}/readings",
        json={"fillLevel": 10, "recordedAt": "2020-01-01T00:00:00Z"},
    )
    await client.post(f"{API}/devices/{device['id']}/readings", json={"fillLevel": 20})

    recent = (await client.get(f"{API}/devices/{device['id']}/readings?range=1h")).json()["data"]
    assert [r["fillLevel"] for r in recent] == [20]

    bad = await client.get(f"{API}/devices/{device['id']}/readings?range=2w")
    assert bad.status_code == 422


async def test_reading_for_foreign_sensor_is_rejected(client):
    first = await _device(client)
    second = await _device(client, name="Bin 8 sensor")
    sensor = await _sensor(client, second["id"])

    response = await client.post(
        f"{API}/devices/{first['id']}/readings", json={"sensorId": sensor["id"], "fillLevel": 5}
    )
    assert response.status_code == 404


async def test_device_ingestion(client, anon):
    device = await _device(client)
    headers = {"X-Device-Id": device["deviceId"], "X-Device-Token": device["deviceToken"]}

    response = await anon.post(
        f"{API}/ingest/readings",
        headers=headers,
        json={
            "value": 21.4,
            "unit": "°C",
            "temperature": 21.4,
            "itemsDetected": [{"item": "Paper", "confidence": 0.91, "count": 3}],
        },
    )
    assert response.status_code == 201, response.text
    assert response.json()["data"]["itemsDetected"][0]["item"] == "Paper"

    updated = (await client.get(f"{API}/devices/{device['id']}")).json()["data"]
    assert updated["lastReading"] == 21.4
    assert updated["lastReadingUnit"] == "°C"


async def test_ingestion_rejects_bad_credentials(client, anon):
    device = await _device(client)

    wrong = await anon.post(
        f"{API}/ingest/readings",
        headers={"X-Device-Id": device["deviceId"], "X-Device-Token": "nope"},
        json={"fillLevel": 50},
    )
    assert wrong.status_code == 401

    missing = await anon.post(f"{API}/ingest/readings", json={"fillLevel": 50})
    assert missing.status_code == 401


async def test_sensor_and_image_crud_follow_device_scope(client, other_client):
    device = await _device(client)
    sensor = await _sensor(client, device["id"], sensor_type="camera")

    listed = (await client.get(f"{API}/sensors", params={"deviceId": device["id"]})).json()
    assert [s["id"] for s in listed["data"]] == [sensor["id"]]

    image = await client.post(
        f"{API}/images",
        json={"deviceId": device["id"], "imageUrl": "https://cdn.test/bin7.jpg",
              "analysisResult": {"items": ["Paper"]}},
    )
    assert image.status_code == 201, image.text

    foreign = await other_client.post(
        f"{API}/sensors", json={"deviceId": device["id"], "name": "x", "sensorType": "weight"}
    )
    assert foreign.status_code == 404

    assert (await client.delete(f"{API}/devices/{device['id']}")).status_code == 204
    assert (await client.get(f"{API}/devices/{device['id']}")).status_code == 404


async def test_readings_window_keeps_the_newest_when_capped(client, monkeypatch):
    monkeypatch.setattr(device_service, "MAX_READINGS_PER_WINDOW", 3)
    device = await _device(client)
    start = datetime.now(timezone.utc) - timedelta(hours=5)
    for hour in range(5):
        response = await client.post(
            f"{API}/devices/{device['id']}/readings",
            json={"fillLevel": 10 + hour, "recordedAt": (start + timedelta(hours=hour)).isoformat()},
        )
        assert response.status_code == 201, response.text
    await client.post(f"{API}/devices/{device['id']}/readings", json={"fillLevel": 99.5})

    readings = (await client.get(f"{API}/devices/{device['id']}/readings?range=24h")).json()["data"]
    assert [r["fillLevel"] for r in readings] == [13, 14, 99.5]
