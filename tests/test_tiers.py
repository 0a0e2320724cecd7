from __future__ import annotations

import pytest

from stream_core.tiers import college_tier, performance_level


@pytest.mark.parametrize(
    "pct, level, tier",
    [
        (100.0, "Excellent", "Premier"),
        (85.0, "Excellent", "Premier"),
        (84.99, "Very Good", "Tier-1"),
        (70.0, "Very Good", "Tier-1"),
        (69.9, "Good", "Tier-2"),
        (55.0, "Good", "Tier-2"),
        (54.5, "Average", "Tier-3"),
        (40.0, "Average", "Tier-3"),
        (39.99, "Needs Improvement", "Foundation"),
        (0.0, "Needs Improvement", "Foundation"),
    ],
)
def test_band_boundaries(pct, level, tier):
    assert performance_level(pct) == level
    assert college_tier(pct) == tier


def test_labels_are_monotonic():
    levels = ["Needs Improvement", "Average", "Good", "Very Good", "Excellent"]
    tiers = ["Foundation", "Tier-3", "Tier-2", "Tier-1", "Premier"]
    prev_l = prev_t = -1
    for step in range(0, 1001):
        pct = step / 10.0
        li = levels.index(performance_level(pct))
        ti = tiers.index(college_tier(pct))
        assert li >= prev_l and ti >= prev_t
        prev_l, prev_t = li, ti
