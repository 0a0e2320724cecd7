# stream_core/tiers.py
from .config import PERFORMANCE_BANDS, PERFORMANCE_FLOOR, COLLEGE_TIER_BANDS, COLLEGE_TIER_FLOOR

def _band(pct, bands, floor) -> str:
    p = float(pct)
    for lower, label in bands:
        if p >= lower: return label
    return floor

def performance_level(pct: float) -> str:
    return _band(pct, PERFORMANCE_BANDS, PERFORMANCE_FLOOR)

def college_tier(pct: float) -> str:
    return _band(pct, COLLEGE_TIER_BANDS, COLLEGE_TIER_FLOOR)
