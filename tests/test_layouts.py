from app.services.layout import SLOTS, normalize_modules, toggled

API = "/api/v1"


def test_normalize_drops_repeats_keeping_first():
    slot = SLOTS["dashboard-layout"]
    assert normalize_modules(slot, ["goals", "metrics", "goals"]) == ["goals", "metrics"]


def test_toggled():
    assert toggled(["a", "b"], "a") == ["b"]
    assert toggled(["a"], "b") == ["a", "b"]


async def test_defaults_before_anything_is_saved(client):
    layout = (await client.get(f"{API}/layouts/dashboard-layout")).json()["data"]
    assert layout["slot"] == "dashboard-layout"
    assert layout["visibleModules"] == [
        "metrics", "quickActions", "goals", "initiatives", "trends", "pickups",
    ]
    assert {"id": "quickActions", "name": "Quick Actions"} in layout["availableModules"]

    mode = (await client.get(f"{API}/layouts/app-mode")).json()["data"]
    assert mode == {"mode": "simple"}


async def test_set_modules(client):
    response = await client.put(
        f"{API}/layouts/homepage-layout", json={"visibleModules": ["sankey", "metrics", "sankey"]}
    )
    assert response.status_code == 200
    assert response.json()["data"]["visibleModules"] == ["sankey", "metrics"]

    again = (await client.get(f"{API}/layouts/homepage-layout")).json()["data"]
    assert again["visibleModules"] == ["sankey", "metrics"]

    bad = await client.put(f"{API}/layouts/homepage-layout", json={"visibleModules": ["weather"]})
    assert bad.status_code == 422


async def test_unknown_slot_is_not_found(client):
    assert (await client.get(f"{API}/layouts/sidebar")).status_code == 404


async def test_toggle_and_reset(client):
    hidden = (
        await client.post(f"{API}/layouts/dashboard-layout/toggle", json={"module": "goals"})
    ).json()["data"]
    assert "goals" not in hidden["visibleModules"]

    shown = (
        await client.post(f"{API}/layouts/dashboard-layout/toggle", json={"module": "leaderboard"})
    ).json()["data"]
    assert shown["visibleModules"][-1] == "leaderboard"

    reset = (await client.post(f"{API}/layouts/dashboard-layout/reset")).json()["data"]
    assert reset["visibleModules"] == [
        "metrics", "quickActions", "goals", "initiatives", "trends", "pickups",
    ]


async def test_app_mode_drives_navigation_defaults(client):
    simple = (await client.get(f"{API}/layouts/navigation-modules")).json()["data"]
    assert simple["visibleModules"][0] == "home"
    assert "dataModels" not in simple["visibleModules"]

    toggled_mode = (await client.post(f"{API}/layouts/app-mode/toggle")).json()["data"]
    assert toggled_mode == {"mode": "advanced"}

    advanced = (await client.get(f"{API}/layouts/navigation-modules")).json()["data"]
    assert advanced["visibleModules"] == ["home", "dataModels", "advancedAnalytics", "alerts", "help"]

    # An explicit mode wins over the saved one
    reset = (
        await client.post(f"{API}/layouts/navigation-modules/reset", params={"mode": "simple"})
    ).json()["data"]
    assert "wastepoints" in reset["visibleModules"]

    assert (await client.put(f"{API}/layouts/app-mode", json={"mode": "expert"})).status_code == 422


async def test_layouts_are_per_user(client, other_client):
    await client.put(f"{API}/layouts/dashboard-layout", json={"visibleModules": ["metrics"]})
    theirs = (await other_client.get(f"{API}/layouts/dashboard-layout")).json()["data"]
    assert len(theirs["visibleModules"]) == 6
