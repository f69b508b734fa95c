from datetime import datetime, timezone
from types import SimpleNamespace

from sqlalchemy import inspect

from app.domain import Initiative, InitiativeTask, Milestone, Organization, User
from app.services.initiative import build_board, event_color, timeline_events

API = "/api/v1"


def _initiative(title: str, **overrides) -> dict:
    return {
        "title": title,
        "description": f"{title} rollout",
        "category": "recycling",
        "startDate": "2026-01-01T00:00:00Z",
        "targetDate": "2026-06-30T00:00:00Z",
        **overrides,
    }


async def _create(client, title: str, **overrides) -> dict:
    response = await client.post(f"{API}/initiatives", json=_initiative(title, **overrides))
    assert response.status_code == 201, response.text
    return response.json()["data"]


# ---------------------------------------------------------------------------
# Pure read models
# ---------------------------------------------------------------------------

def _row(id_: str, status: str) -> SimpleNamespace:
    return SimpleNamespace(
        id=id_,
        title=id_.upper(),
        status=status,
        start_date=datetime(2026, 1, 1),
        target_date=datetime(2026, 2, 1, tzinfo=timezone.utc),
    )


def test_board_has_fixed_columns_and_keeps_order():
    rows = [_row("a", "active"), _row("b", "planning"), _row("c", "active"), _row("d", "archived")]
    board = build_board(rows)
    assert [c["id"] for c in board] == ["planning", "active", "completed", "cancelled"]
    assert [c["title"] for c in board] == ["Planning", "Active", "Completed", "Cancelled"]
    assert [r.id for r in board[1]["initiatives"]] == ["a", "c"]
    assert sum(len(c["initiatives"]) for c in board) == 3


def test_timeline_events_filter_and_color():
    rows = [_row("a", "active"), _row("b", "cancelled")]
    events = timeline_events(rows)
    assert [e["color"] for e in events] == ["#37b5fe", "#ef4444"]
    assert all(e["all_day"] for e in events)
    assert events[0]["start"].tzinfo is not None

    assert [e["id"] for e in timeline_events(rows, "cancelled")] == ["b"]
    assert len(timeline_events(rows, "all")) == 2
    assert event_color("unknown") == "#3b82f6"


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------

async def test_create_with_tasks_and_milestones(client):
    created = await _create(
        client,
        "Cardboard baling",
        estimatedImpact={"wasteReduction": 12.5, "costSavings": 4000, "carbonReduction": 1.2},
        tasks=[{"title": "Buy baler", "priority": "high"}, {"title": "Train staff"}],
        milestones=[{"title": "Baler live", "targetDate": "2026-03-01T00:00:00Z"}],
    )
    assert created["status"] == "planning"
    assert created["progress"] == 25
    assert created["estimatedImpact"] == {"wasteReduction": 12.5, "costSavings": 4000, "carbonReduction": 1.2}
    assert [t["title"] for t in created["tasks"]] == ["Buy baler", "Train staff"]
    assert created["tasks"][0]["priority"] == "high"
    assert created["milestones"][0]["status"] == "pending"


async def test_target_before_start_is_rejected(client):
    response = await client.post(
        f"{API}/initiatives",
        json=_initiative("Backwards", startDate="2026-06-01T00:00:00Z", targetDate="2026-01-01T00:00:00Z"),
    )
    assert response.status_code == 422

    created = await _create(client, "Forwards")
    response = await client.put(
        f"{API}/initiatives/{created['id']}", json={"targetDate": "2025-12-01T00:00:00Z"}
    )
    assert response.status_code == 422


async def test_board_endpoint(client):
    a = await _create(client, "A")
    b = await _create(client, "B", status="active")
    c = await _create(client, "C")

    columns = (await client.get(f"{API}/initiatives/board")).json()["data"]
    assert [col["id"] for col in columns] == ["planning", "active", "completed", "cancelled"]
    assert [i["id"] for i in columns[0]["initiatives"]] == [a["id"], c["id"]]
    assert [i["id"] for i in columns[1]["initiatives"]] == [b["id"]]
    assert columns[1]["initiatives"][0]["progress"] == 50


async def test_move_between_columns(client):
    created = await _create(client, "Composting")

    moved = await client.patch(f"{API}/initiatives/{created['id']}/status", json={"status": "completed"})
    assert moved.status_code == 200
    assert moved.json()["data"]["status"] == "completed"
    assert moved.json()["data"]["progress"] == 100

    same = await client.patch(f"{API}/initiatives/{created['id']}/status", json={"status": "completed"})
    assert same.status_code == 200
    assert same.json()["data"]["updatedAt"] == moved.json()["data"]["updatedAt"]

    unknown = await client.patch(f"{API}/initiatives/{created['id']}/status", json={"status": "done"})
    assert unknown.status_code == 422
    fetched = (await client.get(f"{API}/initiatives/{created['id']}")).json()["data"]
    assert fetched["status"] == "completed"


async def test_timeline_endpoint(client):
    await _create(client, "Plan")
    await _create(client, "Run", status="active")

    events = (await client.get(f"{API}/initiatives/timeline")).json()["data"]
    assert {e["title"]: e["color"] for e in events} == {"Plan": "#f59e0b", "Run": "#37b5fe"}
    assert all(e["allDay"] for e in events)

    active = (await client.get(f"{API}/initiatives/timeline", params={"status": "active"})).json()["data"]
    assert [e["title"] for e in active] == ["Run"]

    bad = await client.get(f"{API}/initiatives/timeline", params={"status": "paused"})
    assert bad.status_code == 422


async def test_task_lifecycle(client):
    created = await _create(client, "Glass recovery")
    base = f"{API}/initiatives/{created['id']}"

    task = (await client.post(f"{base}/tasks", json={"title": "Find buyer"})).json()["data"]
    assert task["status"] == "todo"

    updated = await client.put(f"{base}/tasks/{task['id']}", json={"status": "completed", "progress": 100})
    assert updated.status_code == 200
    assert updated.json()["data"]["progress"] == 100

    fetched = (await client.get(base)).json()["data"]
    assert [t["status"] for t in fetched["tasks"]] == ["completed"]

    assert (await client.delete(f"{base}/tasks/{task['id']}")).status_code == 204
    assert (await client.get(base)).json()["data"]["tasks"] == []
    assert (await client.delete(f"{base}/tasks/{task['id']}")).status_code == 404


async def test_milestones(client):
    created = await _create(client, "Pallet reuse")
    base = f"{API}/initiatives/{created['id']}"

    milestone = await client.post(
        f"{base}/milestones", json={"title": "Pilot", "targetDate": "2026-02-01T00:00:00Z"}
    )
    assert milestone.status_code == 201
    milestone_id = milestone.json()["data"]["id"]

    done = await client.put(f"{base}/milestones/{milestone_id}", json={"status": "completed"})
    assert done.json()["data"]["status"] == "completed"


async def test_initiatives_are_tenant_scoped(client, other_client):
    created = await _create(client, "Private")
    assert (await other_client.get(f"{API}/initiatives/{created['id']}")).status_code == 404
    columns = (await other_client.get(f"{API}/initiatives/board")).json()["data"]
    assert all(col["initiatives"] == [] for col in columns)


def test_relationships_load_eagerly_and_one_way():
    tasks = inspect(Initiative).relationships["tasks"]
    assert tasks.lazy == "selectin"
    assert tasks.back_populates is None
    for model in (InitiativeTask, Milestone, Organization, User):
        assert not inspect(model).relationships
