# stream_core/colleges.py
from __future__ import annotations
from typing import List, Optional
from .config import DEFAULT_DISTRICT

# percentage floor -> institution types, high to low
_COLLEGE_BANDS = (
    (85.0, ("Government Science College", "University College")),
    (70.0, ("District Government College", "Regional Engineering College")),
    (55.0, ("Government Degree College", "Government Arts & Science College")),
    (0.0,  ("Government First Grade College", "Government Diploma Institute")),
)

def suggest_colleges(percentage: float, district: Optional[str] = None) -> List[str]:
    place = (district or "").strip() or DEFAULT_DISTRICT
    p = float(percentage)
    for floor, names in _COLLEGE_BANDS:
        if p >= floor:
            return [f"{n}, {place}" for n in names]
    return [f"{n}, {place}" for n in _COLLEGE_BANDS[-1][1]]
