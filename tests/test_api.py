"""Tests for the HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from courtfee.main import app

client = TestClient(app)


def test_health():
    """Health endpoint responds ok."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_metrics_reports_rule_table():
    """Metrics expose the rule table version and checksum."""
    body = client.get("/metrics").json()
    assert body["rule_table_version"] == "2024.1.0"
    assert len(body["rule_table_checksum"]) == 64


def test_calculate_fee():
    """Fee endpoint returns the quote with breakdown."""
    response = client.post(
        "/v1/fees",
        json={"claim_amount": 2_000_000, "jurisdiction": "general", "exemption_id": "disabled_1_2"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["validation"]["is_valid"] is True
    assert body["result"]["final_fee"] == 35_000
    assert len(body["result"]["calculation"]["breakdown"]) == 2


def test_calculate_fee_validation_failure():
    """Invalid claim amount is a 200 with a validation code, not an error."""
    response = client.post("/v1/fees", json={"claim_amount": 0, "jurisdiction": "arbitration"})
    assert response.status_code == 200
    body = response.json()
    assert body["result"] is None
    assert body["validation"]["code"] == "NON_POSITIVE_VALUE"


def test_calculate_fee_inapplicable_exemption():
    """Exemption from another jurisdiction is rejected."""
    response = client.post(
        "/v1/fees",
        json={"claim_amount": 50_000, "jurisdiction": "arbitration", "exemption_id": "veterans"},
    )
    assert response.status_code == 422


def test_calculate_fee_unknown_jurisdiction():
    """Unknown jurisdiction fails request validation."""
    response = client.post("/v1/fees", json={"claim_amount": 50_000, "jurisdiction": "moon"})
    assert response.status_code == 422


def test_list_exemptions():
    """Exemptions endpoint filters by jurisdiction."""
    body = client.get("/v1/exemptions", params={"jurisdiction": "arbitration"}).json()
    assert body["jurisdiction"] == "arbitration"
    assert [e["id"] for e in body["exemptions"]] == ["disabled_arbitration"]


def test_rule_table_status():
    """Rule table endpoint reports version, freshness and integrity."""
    body = client.get("/v1/rule-table").json()
    assert body["version_info"]["version"] == "2024.1.0"
    assert body["integrity_problems"] == []
    assert "days_since_update" in body["freshness"]


@pytest.mark.parametrize("claim_amount", [True, "abc", "20000"])
def test_calculate_fee_non_numeric_claim(claim_amount):
    """Booleans and strings are reported as INVALID_TYPE, not coerced to numbers."""
    response = client.post("/v1/fees", json={"claim_amount": claim_amount, "jurisdiction": "general"})
    assert response.status_code == 200
    body = response.json()
    assert body["result"] is None
    assert body["validation"]["code"] == "INVALID_TYPE"
