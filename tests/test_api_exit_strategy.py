# tests/test_api_exit_strategy.py
import math

import wholesale.api.http as http_module

PAYLOAD = {
    "arv": 200000,
    "purchasePrice": 120000,
    "repairs": 20000,
    "mortgageBalance": 80000,
    "interestRate": 5,
    "propertyCondition": "fair",
    "sellerMotivation": "high",
    "sellerNeedsCash": True,
    "userLiquidCapital": 5000,
}


def test_exit_strategy_success(client):
    r = client.post("/api/deals/exit-strategy", json=PAYLOAD)
    assert r.status_code == 200, r.text
    data = r.json()

    assert data["tier1Result"]["recommendation"] == "standard"
    assert data["tier2Result"] is None
    assert data["tier3Result"] is None
    assert data["metrics"]["spread"] == 60000
    assert data["input"]["propertyCondition"] == "fair"

    recs = data["recommendations"]
    assert [r["strategy"] for r in recs] == ["assignment"]
    assert recs[0]["rank"] == 1
    assert recs[0]["estimatedProfit"] == 15000
    assert recs[0]["riskLevel"] == "low"
    assert recs[0]["timeToClose"] == "2-4 weeks"
    assert len(data["warnings"]) == 1


def test_exit_strategy_accepts_snake_case_too(client):
    snake = {
        "arv": 150000,
        "purchase_price": 150000,
        "repairs": 30000,
        "mortgage_balance": 140000,
        "interest_rate": 8,
        "property_condition": "poor",
        "seller_motivation": "low",
        "seller_needs_cash": False,
        "user_liquid_capital": 0,
    }
    r = client.post("/api/deals/exit-strategy", json=snake)
    assert r.status_code == 200, r.text
    data = r.json()

    assert data["tier1Result"]["recommendation"] == "pass"
    assert data["recommendations"] == []
    assert data["warnings"][0] == "Deal has low equity and high interest rate - consider passing"


def test_missing_field_returns_400(client):
    bad = dict(PAYLOAD)
    bad.pop("sellerNeedsCash")

    r = client.post("/api/deals/exit-strategy", json=bad)
    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "Validation failed"
    assert any("sellerNeedsCash" in d["loc"] for d in body["details"])


def test_out_of_range_rate_returns_400(client):
    r = client.post("/api/deals/exit-strategy", json={**PAYLOAD, "interestRate": 31})
    assert r.status_code == 400


def test_negative_money_returns_400(client):
    r = client.post("/api/deals/exit-strategy", json={**PAYLOAD, "arv": -1})
    assert r.status_code == 400


def test_unknown_condition_is_not_accepted(client):
    r = client.post("/api/deals/exit-strategy", json={**PAYLOAD, "propertyCondition": "unknown"})
    assert r.status_code == 400


def test_malformed_json_returns_400(client):
    r = client.post(
        "/api/deals/exit-strategy",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400


def test_unexpected_failure_returns_500(client, monkeypatch):
    def boom(_inp, thresholds=None):
        raise RuntimeError("decision table exploded")

    monkeypatch.setattr(http_module, "evaluate_exit_strategy", boom)

    r = client.post("/api/deals/exit-strategy", json=PAYLOAD)
    assert r.status_code == 500
    assert r.json() == {"error": "Analysis failed"}


def test_amounts_beyond_the_ceiling_return_400(client):
    huge = {**PAYLOAD, "arv": 1e308, "purchasePrice": 1e308, "repairs": 1e308}

    r = client.post("/api/deals/exit-strategy", json=huge)
    assert r.status_code == 400
    assert r.json()["error"] == "Validation failed"


def test_tiny_arv_still_returns_finite_metrics(client):
    r = client.post(
        "/api/deals/exit-strategy",
        json={**PAYLOAD, "arv": 5e-324, "purchasePrice": 1e12, "mortgageBalance": 0},
    )
    assert r.status_code == 200, r.text
    data = r.json()

    assert math.isfinite(data["metrics"]["spreadRatio"])
    assert math.isfinite(data["tier1Result"]["spreadPercent"])
    assert data["metrics"]["spreadRatio"] == -1e6
    assert [r["strategy"] for r in data["recommendations"]] == ["seller_finance"]
    assert data["recommendations"][0]["estimatedProfit"] == 0
