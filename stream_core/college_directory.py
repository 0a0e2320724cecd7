"""Static directory of colleges shipped as package data.

Lookups mirror what the quiz flow needs: by district or state, by the
stream a college offers, government-only listings, details and a side by
side comparison. All matching is case-insensitive.
"""

from __future__ import annotations

import json
import pathlib
from statistics import mean
from typing import Any, Dict, Iterable, List, Optional

from .types import College

DATA_PATH = pathlib.Path(__file__).resolve().parent / "data" / "colleges.json"

# search results list stronger tiers first
TIER_RANK = {"Premier": 1, "Excellent": 2, "Good": 3, "Foundation": 4}

RECOMMEND_LIMIT = 10

_STREAM_COURSES = (
    ("Science", [("B.Sc Physics", "3 years", 60), ("B.Sc Chemistry", "3 years", 60), ("B.Sc Mathematics", "3 years", 40)]),
    ("Commerce", [("B.Com", "3 years", 120), ("BBA", "3 years", 60)]),
    ("Arts", [("BA English", "3 years", 80), ("BA History", "3 years", 60)]),
    ("Engineering", [("B.Tech CSE", "4 years", 120), ("B.Tech ECE", "4 years", 60)]),
)

_BASE_FACILITIES = ["Library", "Computer Lab", "WiFi", "Canteen"]
_TIER_FACILITIES = {
    "Premier": ["Research Centers", "Auditorium", "Sports Complex", "Hostel", "Industry Partnerships"],
    "Excellent": ["Auditorium", "Sports Facilities", "Hostel", "Placement Cell"],
    "Good": ["Sports Ground", "Placement Cell"],
}


def college_from_dict(raw: Dict[str, Any]) -> College:
    streams = raw.get("streamsOffered") or []
    if isinstance(streams, str):
        streams = streams.split(",")
    return College(
        id=int(raw["id"]),
        name=str(raw["name"]),
        district=str(raw.get("district", "")),
        state=str(raw.get("state", "")),
        college_type=str(raw.get("collegeType", "Government")),
        college_tier=str(raw.get("collegeTier", "Good")),
        streams_offered=tuple(s.strip() for s in streams if s.strip()),
        pincode=str(raw.get("pincode", "")),
        address=str(raw.get("address", "")),
        establishment_year=raw.get("establishmentYear"),
        website=str(raw.get("website", "")),
        phone=str(raw.get("phone", "")),
        email=str(raw.get("email", "")),
        fees_range=str(raw.get("feesRange", "")),
        placement_rate=float(raw.get("placementRate") or 0.0),
    )


def load_colleges(path: pathlib.Path = DATA_PATH) -> List[College]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    return [college_from_dict(r) for r in raw]


def _norm(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def _contains(haystack: str, needle: Optional[str]) -> bool:
    n = _norm(needle)
    return not n or n in haystack.lower()


def _by_tier(colleges: Iterable[College]) -> List[College]:
    return sorted(colleges, key=lambda c: TIER_RANK.get(c.college_tier, 5))


def by_district(district: str) -> List[College]:
    want = _norm(district)
    return [c for c in load_colleges() if c.district.lower() == want]


def by_state(state: str) -> List[College]:
    want = _norm(state)
    return [c for c in load_colleges() if c.state.lower() == want]


def government_by_district(district: str) -> List[College]:
    return [c for c in load_colleges()
            if _contains(c.district, district) and c.college_type.lower() == "government"]


def by_stream(stream: str) -> List[College]:
    return [c for c in load_colleges() if c.offers(stream)]


def search(
    district: Optional[str] = None,
    state: Optional[str] = None,
    college_type: Optional[str] = None,
    stream: Optional[str] = None,
) -> List[College]:
    """Partial, case-insensitive match on every filter given; unset filters match all."""
    hits = [
        c for c in load_colleges()
        if _contains(c.district, district)
        and _contains(c.state, state)
        and _contains(c.college_type, college_type)
        and (not _norm(stream) or c.offers(stream))
    ]
    return _by_tier(hits)


def get_college(college_id: int) -> Optional[College]:
    return next((c for c in load_colleges() if c.id == int(college_id)), None)


def recommended(stream: str, district: Optional[str] = None, performance_level: Optional[str] = None) -> List[College]:
    """Colleges offering the stream, preferring the student's district and filtered by performance."""
    colleges = [c for c in by_stream(stream) if _contains(c.district, district)]
    if not colleges and _norm(district):
        colleges = by_stream(stream)
    if performance_level == "Excellent":
        colleges = [c for c in colleges if c.college_tier in ("Premier", "Excellent")]
    elif performance_level == "Good":
        colleges = [c for c in colleges if c.college_tier != "Foundation"]
    return colleges[:RECOMMEND_LIMIT]


def courses_for(college: College) -> List[Dict[str, Any]]:
    out = []
    for stream, courses in _STREAM_COURSES:
        if college.offers(stream):
            out.extend({"name": n, "duration": d, "seats": s} for n, d, s in courses)
    return out


def facilities_for(college: College) -> List[str]:
    return _BASE_FACILITIES + _TIER_FACILITIES.get(college.college_tier, [])


def summary(c: College) -> Dict[str, Any]:
    return {
        "collegeId": c.id,
        "name": c.name,
        "district": c.district,
        "state": c.state,
        "collegeType": c.college_type,
        "collegeTier": c.college_tier,
        "streamsOffered": list(c.streams_offered),
        "establishmentYear": c.establishment_year,
        "website": c.website,
        "placementRate": c.placement_rate,
    }


def details(c: College) -> Dict[str, Any]:
    out = summary(c)
    out.update({
        "pincode": c.pincode,
        "address": c.address,
        "coursesOffered": courses_for(c),
        "facilities": facilities_for(c),
        "phone": c.phone,
        "email": c.email,
        "feesRange": c.fees_range,
        "contactInfo": {"phone": c.phone, "email": c.email, "website": c.website},
    })
    return out


def compare(colleges: List[College]) -> Dict[str, Any]:
    fees: List[str] = []
    for c in colleges:
        if c.fees_range not in fees:
            fees.append(c.fees_range)
    return {
        "colleges": [details(c) for c in colleges],
        "metrics": {
            "averagePlacementRate": round(mean(c.placement_rate for c in colleges), 2) if colleges else 0.0,
            "feeRanges": fees,
            "establishmentYears": sorted(c.establishment_year for c in colleges if c.establishment_year is not None),
        },
    }
