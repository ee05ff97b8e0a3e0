# tests/test_api_deals.py
from datetime import datetime, timedelta, timezone

import wholesale.api.http as http_module


def test_analyze_success(client):
    payload = {
        "address": "123 Main St",
        "condition": "fair",
        "motivation": "high",
        "mortgageBalance": 100000,
        "sqft": 1500,
    }
    r = client.post("/api/deals/analyze", json=payload)
    assert r.status_code == 200, r.text
    data = r.json()

    assert len(data["comps"]) == 4
    assert data["arv"] > 0
    assert 0 <= data["arvConfidence"] <= 100
    assert data["rehabEstimate"]["medium"] == 60000
    assert data["maoBreakdown"]["repairs"] == 60000
    assert data["maoBreakdown"]["wholesaleFee"] == 10000
    assert data["grade"] in {"A", "B", "C", "F"}
    assert len(data["gradeReasons"]) == 3
    assert "estimatedProfit" in data["profitProjection"]


def test_analyze_same_address_same_arv(client):
    a = client.post("/api/deals/analyze", json={"address": "42 Elm Ct"}).json()
    b = client.post("/api/deals/analyze", json={"address": "42 Elm Ct"}).json()

    assert a["arv"] == b["arv"]
    assert [c["address"] for c in a["comps"]] == [c["address"] for c in b["comps"]]


def test_analyze_requires_address(client):
    r = client.post("/api/deals/analyze", json={"condition": "fair"})
    assert r.status_code == 400


def test_analyze_rejects_tiny_sqft(client):
    r = client.post("/api/deals/analyze", json={"address": "1 A St", "sqft": 50})
    assert r.status_code == 400


def test_comps_sorted_by_distance(client):
    r = client.get("/api/deals/comps", params={"address": "1 Main St"})
    assert r.status_code == 200, r.text
    comps = r.json()

    assert len(comps) == 4
    distances = [c["distance"] for c in comps]
    assert distances == sorted(distances)
    assert {"salePrice", "saleDate", "pricePerSqft", "adjustedValue"} <= set(comps[0])


def test_comps_without_address(client):
    r = client.get("/api/deals/comps")
    assert r.status_code == 400
    assert r.json() == {"error": "Address is required"}

    r = client.get("/api/deals/comps", params={"address": "   "})
    assert r.status_code == 400


def test_heat_score_critical(client):
    recent = (datetime.now(timezone.utc) - timedelta(days=5)).isoformat()
    payload = {
        "indicators": [
            {"type": "foreclosure", "dateRecorded": recent},
            {"type": "nod", "dateRecorded": recent},
        ]
    }
    r = client.post("/api/leads/heat-score", json=payload)
    assert r.status_code == 200, r.text
    data = r.json()

    assert data["heatScore"] == 20
    assert data["heatCategory"] == "CRITICAL"
    assert [i["decayedWeight"] for i in data["indicators"]] == [10, 10]


def test_heat_score_stale_indicator_is_halved(client):
    old = (datetime.now(timezone.utc) - timedelta(days=365)).isoformat()
    r = client.post(
        "/api/leads/heat-score",
        json={"indicators": [{"type": "code_violation", "dateRecorded": old}]},
    )
    assert r.status_code == 200
    data = r.json()

    assert data["heatScore"] == 4
    assert data["heatCategory"] == "STREET_WORK"


def test_heat_score_rejects_unknown_distress(client):
    r = client.post(
        "/api/leads/heat-score",
        json={"indicators": [{"type": "haunted", "dateRecorded": "2026-01-01T00:00:00Z"}]},
    )
    assert r.status_code == 400


def test_heat_score_failure_returns_json_500(client, monkeypatch):
    def boom(_raw):
        raise RuntimeError("weights table missing")

    monkeypatch.setattr(http_module, "calculate_heat_score_from_raw", boom)

    r = client.post("/api/leads/heat-score", json={"indicators": []})
    assert r.status_code == 500
    assert r.json() == {"error": "Heat score calculation failed"}


def test_analyze_flags_asking_price_above_mao(client):
    r = client.post("/api/deals/analyze", json={"address": "9 High Ask Rd", "askingPrice": 1e9})
    assert r.status_code == 200, r.text
    data = r.json()

    assert data["askingAboveMao"] is True
    assert data["gradeReasons"][-1].startswith("Asking price ($1,000,000,000) is above MAO")
