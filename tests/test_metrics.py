from datetime import datetime, timezone
from types import SimpleNamespace

from app.services.metrics import (
    DEMO_SANKEY,
    disposal_buckets,
    resolve_timeframe,
    round_half_up,
    sankey_links,
    summarize,
)

API = "/api/v1"


def _sample(metric_type: str, value: float, day: int, hour: int = 12) -> SimpleNamespace:
    return SimpleNamespace(
        metric_type=metric_type,
        value=value,
        recorded_at=datetime(2026, 3, day, hour, tzinfo=timezone.utc),
    )


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
    assert round_half_up(-0.5) == 0


def test_resolve_timeframe():
    assert resolve_timeframe("6m") == "6m"
    assert resolve_timeframe("5y") == "1m"
    assert resolve_timeframe(None) == "1m"


def test_summarize_sums_and_averages():
    samples = [
        _sample("waste_reduction", 10, 1),
        _sample("waste_reduction", 5.5, 2),
        _sample("recycling_rate", 40, 1),
        _sample("recycling_rate", 45, 2),
        _sample("waste_total", 999, 2),
    ]
    summary = summarize(samples, "1m")
    assert summary["waste_reduction"] == 15.5
    assert summary["recycling_rate"] == 42.5
    assert summary["vendor_performance"] == 0
    assert summary["carbon_footprint"] == 0
    assert len(summary["history"]["waste_reduction"]) == 2
    assert "waste_total" not in summary["history"]


def test_disposal_buckets_average_per_day():
    samples = [
        _sample("waste_total", 100, 1, hour=8),
        _sample("waste_total", 50, 1, hour=17),
        _sample("waste_recyclable", 30, 1),
        _sample("waste_total", 10, 2),
        _sample("recycling_rate", 99, 2),
    ]
    buckets = disposal_buckets(samples)
    assert [b["timestamp"].day for b in buckets] == [1, 2]
    assert buckets[0]["total"] == 75
    assert buckets[0]["recyclable"] == 30
    assert buckets[0]["nonrecyclable"] == 0
    assert buckets[1]["total"] == 10


def test_sankey_without_data_is_the_demo_flow():
    links = sankey_links([])
    assert len(links) == len(DEMO_SANKEY) == 15
    assert links[0] == {"source": "Total Waste", "target": "Plastics", "value": 30}


def test_sankey_splits_averages_by_material():
    links = sankey_links(
        [
            {"total": 120, "recyclable": 70, "nonrecyclable": 50},
            {"total": 80, "recyclable": 50, "nonrecyclable": 30},
        ]
    )
    flows = {(link["source"], link["target"]): link["value"] for link in links}
    assert len(links) == 15
    assert flows[("Total Waste", "Plastics")] == 30
    assert flows[("Total Waste", "Paper")] == 25
    assert flows[("Plastics", "Recycling")] == 18
    assert flows[("Plastics", "Landfill")] == 12
    assert flows[("Organic", "Composting")] == 9
    assert flows[("Organic", "Energy Recovery")] == 6
    assert flows[("Paper", "Energy Recovery")] == 10
    assert flows[("Comingled", "Landfill")] == 4


async def test_record_and_summarize(client):
    for payload in (
        {"metricType": "waste_reduction", "value": 12},
        {"metricType": "waste_reduction", "value": 3},
        {"metricType": "recycling_rate", "value": 40},
        {"metricType": "waste_reduction", "value": 500, "recordedAt": "2020-01-01T00:00:00Z"},
    ):
        response = await client.post(f"{API}/metrics", json=payload)
        assert response.status_code == 201, response.text

    summary = (await client.get(f"{API}/metrics/sustainability")).json()["data"]
    assert summary["timeframe"] == "1m"
    assert summary["wasteReduction"] == 15
    assert summary["recyclingRate"] == 40
    assert len(summary["history"]["waste_reduction"]) == 2

    fallback = (await client.get(f"{API}/metrics/sustainability", params={"timeframe": "5y"})).json()
    assert fallback["data"]["timeframe"] == "1m"

    listed = (await client.get(f"{API}/metrics", params={"type": "recycling_rate"})).json()
    assert listed["meta"]["total"] == 1


async def test_disposal_trends_and_sankey_endpoints(client):
    empty = (await client.get(f"{API}/metrics/sankey")).json()["data"]
    assert len(empty) == 15
    assert empty[0]["value"] == 30

    for metric_type, value in (("waste_total", 200), ("waste_recyclable", 120), ("waste_nonrecyclable", 80)):
        await client.post(f"{API}/metrics", json={"metricType": metric_type, "value": value})

    trends = (await client.get(f"{API}/metrics/disposal-trends")).json()["data"]
    assert len(trends) == 1
    assert trends[0]["total"] == 200

    flows = {
        (link["source"], link["target"]): link["value"]
        for link in (await client.get(f"{API}/metrics/sankey")).json()["data"]
    }
    assert flows[("Total Waste", "Plastics")] == 60
    assert flows[("Metals", "Recycling")] == 24
    assert flows[("Metals", "Landfill")] == 16


async def test_unknown_metric_type_is_rejected(client):
    response = await client.post(f"{API}/metrics", json={"metricType": "happiness", "value": 1})
    assert response.status_code == 422


async def test_metrics_are_tenant_scoped(client, other_client):
    await client.post(f"{API}/metrics", json={"metricType": "cost_savings", "value": 900})
    summary = (await other_client.get(f"{API}/metrics/sustainability")).json()["data"]
    assert summary["costSavings"] == 0
