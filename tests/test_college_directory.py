from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import api.app as app_module
from stream_core import college_directory as cd


def ids(colleges):
    return [c.id for c in colleges]


@pytest.fixture
def client() -> TestClient:
    return TestClient(app_module.app)


def test_seed_directory_loads():
    colleges = cd.load_colleges()
    assert len(colleges) == 23
    assert len({c.id for c in colleges}) == 23
    iisc = cd.get_college(1)
    assert iisc.district == "Bangalore Urban"
    assert iisc.streams_offered == ("Science", "Engineering")
    assert cd.get_college(999) is None


def test_district_and_state_lookups_are_exact_and_case_insensitive():
    assert ids(cd.by_district("bangalore urban")) == [1, 2, 3, 4, 5]
    assert cd.by_district("Bangalore") == []
    assert ids(cd.by_state("MAHARASHTRA")) == [8, 9, 10, 11, 12]


def test_government_only_by_district():
    assert ids(cd.government_by_district("bangalore")) == [2, 3, 5]
    assert all(c.college_type == "Government" for c in cd.government_by_district("Chennai"))


def test_by_stream():
    assert ids(cd.by_stream("management")) == [2, 22]
    assert 15 in ids(cd.by_stream("Arts"))
    assert 1 not in ids(cd.by_stream("Arts"))


def test_search_combines_filters_and_orders_by_tier():
    assert ids(cd.search(state="tamil", stream="arts")) == [14, 15]
    assert ids(cd.search(district="mumbai", college_type="government")) == [8, 10]
    everything = cd.search()
    assert len(everything) == 23
    ranks = [cd.TIER_RANK[c.college_tier] for c in everything]
    assert ranks == sorted(ranks)


def test_recommended_prefers_district_and_filters_by_performance():
    assert ids(cd.recommended("Arts", "Mysore", "Excellent")) == [6]
    assert ids(cd.recommended("Arts", "Mysore")) == [6, 7]
    # nothing in Mysore teaches engineering, so the whole directory is used
    assert ids(cd.recommended("Engineering", "Mysore")) == [1, 3, 8, 10, 11, 13, 20]
    assert len(cd.recommended("Science")) == cd.RECOMMEND_LIMIT


def test_details_derive_courses_and_facilities():
    body = cd.details(cd.get_college(5))
    names = [c["name"] for c in body["coursesOffered"]]
    assert "B.Com" in names and "BA English" in names and "B.Sc Physics" in names
    assert "B.Tech CSE" not in names
    assert "Placement Cell" in body["facilities"]
    assert body["contactInfo"]["website"] == body["website"]


def test_compare_metrics():
    out = cd.compare([cd.get_college(8), cd.get_college(13)])
    assert [c["collegeId"] for c in out["colleges"]] == [8, 13]
    assert out["metrics"]["averagePlacementRate"] == pytest.approx(97.3)
    assert out["metrics"]["feeRanges"] == ["₹2,00,000 - ₹4,00,000"]
    assert out["metrics"]["establishmentYears"] == [1958, 1959]


def test_college_endpoints(client):
    r = client.get("/api/college/search/district/Mysore")
    assert r.status_code == 200
    assert [c["collegeId"] for c in r.json()["colleges"]] == [6, 7]

    r = client.get("/api/college/government/district/bangalore")
    assert r.json()["count"] == 3

    r = client.get("/api/college/search", params={"district": "pune"})
    assert r.json()["count"] == 2

    r = client.get("/api/college/search/stream/Management")
    assert [c["name"] for c in r.json()["colleges"]][0] == "Indian Institute of Management Bangalore"

    r = client.get("/api/college/recommendations", params={"stream": "Arts", "district": "Mysore", "performance": "Excellent"})
    assert [c["collegeId"] for c in r.json()["colleges"]] == [6]

    r = client.get("/api/college/details/16")
    assert r.status_code == 200
    assert r.json()["collegeTier"] == "Premier"


def test_unknown_college_is_404(client):
    assert client.get("/api/college/details/999").status_code == 404
    assert client.post("/api/college/compare", json=[1, 999]).status_code == 404
    assert client.post("/api/college/compare", json=[]).status_code == 400

    r = client.post("/api/college/compare", json=[1, 2])
    assert r.status_code == 200
    assert len(r.json()["colleges"]) == 2
