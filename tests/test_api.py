"""Tests for the FastAPI adapter."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from healthshare.api import create_app
from healthshare.catalog import CatalogStore, PlanCatalog


@pytest.fixture()
def store(catalog) -> CatalogStore:
    return CatalogStore(catalog)


@pytest.fixture()
def client(store) -> TestClient:
    return TestClient(create_app(store))


class TestHealth:
    def test_health(self, client) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["plans"] == 3


class TestRecommendations:
    def test_capacity_500_selects_single_tier_plan(self, client) -> None:
        resp = client.post("/api/recommendations", json={
            "age": 35,
            "coverage_type": "just_me",
            "financial_capacity": "500",
        })
        assert resp.status_code == 200
        recs = resp.json()["recommendations"]
        assert [r["id"] for r in recs] == ["beta-crowd"]
        assert recs[0]["providerName"] == "Beta Crowd"
        assert recs[0]["ranking"] == 1
        assert recs[0]["eligiblePrices"][0]["initialUnsharedAmount"] == 500

    def test_default_tier_is_1000(self, client) -> None:
        resp = client.post("/api/recommendations", json={"age": 35, "coverage_type": "just_me"})
        assert resp.status_code == 200
        recs = resp.json()["recommendations"]
        assert {r["id"] for r in recs} == {"alpha-standard", "gamma-dpc"}
        for rec in recs:
            assert all(p["initialUnsharedAmount"] == 1000 for p in rec["eligiblePrices"])
            assert {"score", "factors", "explanation"} <= rec.keys()

    def test_response_sorted_by_score(self, client) -> None:
        resp = client.post("/api/recommendations", json={
            "age": 35,
            "coverage_type": "just_me",
            "iua_preference": "5000",
            "expense_preference": "lower_monthly",
        })
        scores = [r["score"] for r in resp.json()["recommendations"]]
        assert scores == sorted(scores, reverse=True)

    def test_no_eligible_plans(self, client) -> None:
        resp = client.post("/api/recommendations", json={"age": 70, "coverage_type": "just_me"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "No eligible plans found for your criteria"}

    def test_bad_payload(self, client) -> None:
        resp = client.post("/api/recommendations", json={"coverage_type": "just_me"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to process recommendations"}

    def test_hot_swapped_catalog_is_used(self, client, store) -> None:
        store.swap(PlanCatalog())
        resp = client.post("/api/recommendations", json={"age": 35, "coverage_type": "just_me"})
        assert resp.status_code == 404
        assert client.get("/health").json()["plans"] == 0
