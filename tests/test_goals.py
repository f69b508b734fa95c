API = "/api/v1"

GOAL = {
    "type": "waste_reduction",
    "description": "Cut landfill volume by a fifth",
    "targetPercentage": 20,
    "startDate": "2026-01-01T00:00:00Z",
    "endDate": "2026-12-31T00:00:00Z",
}


async def test_new_goal_starts_at_zero(client):
    response = await client.post(f"{API}/goals", json=GOAL)
    assert response.status_code == 201, response.text
    goal = response.json()["data"]
    assert goal["currentPercentage"] == 0
    assert goal["status"] == "in_progress"
    assert goal["progress"] == 0


async def test_progress_tracks_current_against_target(client):
    goal = (await client.post(f"{API}/goals", json=GOAL)).json()["data"]

    halfway = await client.put(f"{API}/goals/{goal['id']}", json={"currentPercentage": 10})
    assert halfway.json()["data"]["progress"] == 50.0

    beyond = await client.put(f"{API}/goals/{goal['id']}", json={"currentPercentage": 30})
    assert beyond.json()["data"]["progress"] == 100.0


async def test_end_before_start_is_rejected(client):
    response = await client.post(f"{API}/goals", json={**GOAL, "endDate": "2025-01-01T00:00:00Z"})
    assert response.status_code == 422

    goal = (await client.post(f"{API}/goals", json=GOAL)).json()["data"]
    response = await client.put(f"{API}/goals/{goal['id']}", json={"startDate": "2027-06-01T00:00:00Z"})
    assert response.status_code == 422


async def test_status_filter_and_delete(client):
    first = (await client.post(f"{API}/goals", json=GOAL)).json()["data"]
    await client.post(f"{API}/goals", json=GOAL)
    await client.put(f"{API}/goals/{first['id']}", json={"status": "completed"})

    completed = (await client.get(f"{API}/goals", params={"status": "completed"})).json()
    assert [g["id"] for g in completed["data"]] == [first["id"]]

    assert (await client.delete(f"{API}/goals/{first['id']}")).status_code == 204
    assert (await client.get(f"{API}/goals")).json()["meta"]["total"] == 1
