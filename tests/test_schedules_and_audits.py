API = "/api/v1"


async def _waste_point(client, step: str = "Loading dock") -> dict:
    response = await client.post(
        f"{API}/waste-points",
        json={"processStep": step, "wasteType": "Cardboard", "estimatedVolume": 40,
              "unit": "kg", "vendor": "GreenHaul", "interval": "weekly"},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _schedule(waste_point_id: str, date: str, **overrides) -> dict:
    return {
        "wastePointId": waste_point_id,
        "date": date,
        "wasteTypes": ["Cardboard", "Plastics"],
        "vendor": "GreenHaul",
        **overrides,
    }


async def test_new_schedule_is_pending(client):
    point = await _waste_point(client)
    response = await client.post(f"{API}/schedules", json=_schedule(point["id"], "2026-11-02T08:00:00Z"))
    assert response.status_code == 201, response.text
    body = response.json()["data"]
    assert body["status"] == "pending"
    assert body["wasteTypes"] == ["Cardboard", "Plastics"]
    assert body["wastePointId"] == point["id"]


async def test_schedules_list_by_pickup_date(client):
    dock = await _waste_point(client)
    line = await _waste_point(client, "Packaging line")
    await client.post(f"{API}/schedules", json=_schedule(dock["id"], "2026-11-20T08:00:00Z"))
    await client.post(f"{API}/schedules", json=_schedule(line["id"], "2026-11-05T08:00:00Z"))
    await client.post(f"{API}/schedules", json=_schedule(dock["id"], "2026-11-09T08:00:00Z"))

    listed = (await client.get(f"{API}/schedules")).json()
    assert listed["meta"]["total"] == 3
    assert [s["date"][:10] for s in listed["data"]] == ["2026-11-05", "2026-11-09", "2026-11-20"]

    at_dock = (await client.get(f"{API}/schedules", params={"wastePointId": dock["id"]})).json()
    assert [s["date"][:10] for s in at_dock["data"]] == ["2026-11-09", "2026-11-20"]


async def test_update_schedule_status(client):
    point = await _waste_point(client)
    created = (
        await client.post(f"{API}/schedules", json=_schedule(point["id"], "2026-11-02T08:00:00Z"))
    ).json()["data"]

    response = await client.put(f"{API}/schedules/{created['id']}", json={"status": "completed"})
    assert response.status_code == 200, response.text
    body = response.json()["data"]
    assert body["status"] == "completed"
    assert body["vendor"] == "GreenHaul"

    completed = (await client.get(f"{API}/schedules", params={"status": "completed"})).json()
    assert [s["id"] for s in completed["data"]] == [created["id"]]

    bad = await client.put(f"{API}/schedules/{created['id']}", json={"status": "lost"})
    assert bad.status_code == 422
    missing = await client.put(f"{API}/schedules/no-such-id", json={"status": "completed"})
    assert missing.status_code == 404


async def test_schedule_needs_a_waste_point_in_the_same_org(client, other_client):
    point = await _waste_point(client)
    foreign = await other_client.post(f"{API}/schedules", json=_schedule(point["id"], "2026-11-02T08:00:00Z"))
    assert foreign.status_code == 404

    no_types = await client.post(
        f"{API}/schedules", json=_schedule(point["id"], "2026-11-02T08:00:00Z", wasteTypes=[])
    )
    assert no_types.status_code == 422

    await client.post(f"{API}/schedules", json=_schedule(point["id"], "2026-11-02T08:00:00Z"))
    assert (await other_client.get(f"{API}/schedules")).json()["data"] == []


async def test_audits_are_listed_newest_first(client):
    point = await _waste_point(client)
    for date, volume in (("2026-09-01", 30), ("2026-10-01", 42.5), ("2026-08-01", 25)):
        response = await client.post(
            f"{API}/waste-points/{point['id']}/audits",
            json={"date": f"{date}T00:00:00Z", "auditor": "J. Rivera", "wasteType": "Cardboard",
                  "volume": volume},
        )
        assert response.status_code == 201, response.text

    audits = (await client.get(f"{API}/waste-points/{point['id']}/audits")).json()["data"]
    assert [a["volume"] for a in audits] == [42.5, 30, 25]
    assert audits[0]["wastePointId"] == point["id"]


async def test_audits_validate_and_stay_in_their_org(client, other_client):
    point = await _waste_point(client)
    zero = await client.post(
        f"{API}/waste-points/{point['id']}/audits",
        json={"date": "2026-10-01T00:00:00Z", "auditor": "J. Rivera", "wasteType": "Cardboard", "volume": 0},
    )
    assert zero.status_code == 422

    foreign = await other_client.post(
        f"{API}/waste-points/{point['id']}/audits",
        json={"date": "2026-10-01T00:00:00Z", "auditor": "Eve", "wasteType": "Cardboard", "volume": 5},
    )
    assert foreign.status_code == 404
    assert (await other_client.get(f"{API}/waste-points/{point['id']}/audits")).status_code == 404
