"""
Core scoring engine for the Hot vs Crazy Matrix.

This module contains pure, UI-agnostic functions used by the Streamlit app.
Keep all math and zone geometry here so it can be tested or reused
independently of the UI layer.
"""
from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from models import Criterion, ScoreResult

DEFAULT_SCORE = 5.0
SCORE_MIN = 0.0
SCORE_MAX = 10.0
UNKNOWN_ZONE = "Unknown Zone"

# Priority order used by classify_zone; earlier zones win on shared edges.
ZONE_ORDER: List[str] = [
    "Chromosome Mismatch",
    "Wife Zone",
    "Date Zone",
    "Danger Zone",
    "Fun Zone",
    "No Go Zone",
]

ZONE_DESCRIPTIONS: Dict[str, str] = {
    "Chromosome Mismatch": (
        "Seems too good to be true - verify authenticity. High attraction with low "
        "complexity may indicate incomplete information or misrepresentation."
    ),
    "Wife Zone": (
        "Ideal for long-term relationships. High compatibility with good stability. "
        "Consider introducing to family and friends when appropriate."
    ),
    "Date Zone": (
        "Good for casual dating and exploring compatibility. Located below the "
        "diagonal line in the upper right quadrant."
    ),
    "Danger Zone": (
        "Proceed with caution. High attraction but potentially unstable. Keep "
        "boundaries clear and avoid sharing sensitive information early."
    ),
    "Fun Zone": (
        "Great for exciting experiences but may lack long-term stability. Enjoy the "
        "connection while being mindful of emotional boundaries."
    ),
    "No Go Zone": (
        "Avoid investing time here. These individuals may not meet your standards "
        "for a meaningful relationship. Focus your energy elsewhere."
    ),
}


def clamp_score(value: float) -> float:
    return max(SCORE_MIN, min(SCORE_MAX, float(value)))


def category_score(
    scores: Mapping[str, float],
    criteria: Sequence[Criterion],
    default_score: float = DEFAULT_SCORE,
    normalized: bool = True,
) -> float:
    """
    Aggregate a person's raw ratings over one category's criteria.

    Parameters
    - scores: raw ratings (0..10) keyed by criterion id
    - criteria: the criteria of a single category
    - default_score: rating assumed for criteria missing from `scores`
    - normalized: divide by the total weight instead of trusting it to be 1.0

    Returns
    - the weighted score, clamped to SCORE_MIN..SCORE_MAX

    Notes
    - Entries in `scores` that no criterion refers to are ignored.
    - In normalized mode a zero total weight (or no criteria) yields 0.0.
    - The clamp absorbs float rounding (an all-10 rating can average to
      10.000000000000002) so the point never leaves the zone map. In raw mode
      it also caps sums from weights that total more than 1.0.
    """
    weighted_sum = 0.0
    total_weight = 0.0
    for c in criteria:
        s = scores.get(c.id)
        if s is None:
            s = default_score
        weighted_sum += float(s) * c.weight
        total_weight += c.weight

    if not normalized:
        return clamp_score(weighted_sum)
    if total_weight == 0:
        return 0.0
    return clamp_score(weighted_sum / total_weight)


def classify_zone(x: float, y: float) -> str:
    """
    Map a (hot, crazy) point to its zone name.

    Rules are checked in order and the first match wins, so points on an edge
    shared by two zones belong to the one listed first. All ranges are
    inclusive. Points outside [0, 10] x [0, 10] come back as "Unknown Zone".
    """
    if 8 <= x <= 10 and 0 <= y <= 1:
        return "Chromosome Mismatch"

    if 8 <= x <= 10 and 1 <= y <= 5:
        return "Wife Zone"

    # Upper right, on or below the diagonal
    if 8 <= x <= 10 and 5 <= y <= 10 and y <= x:
        return "Date Zone"

    # On or above the diagonal
    if 5 <= x <= 10 and 5 <= y <= 10 and y >= x:
        return "Danger Zone"

    if 5 <= x <= 8 and 0 <= y <= 8:
        if y < 5 or y < x:
            return "Fun Zone"

    if 0 <= x <= 5 and 0 <= y <= 10:
        return "No Go Zone"

    return UNKNOWN_ZONE


def score_entity(
    scores: Mapping[str, float],
    hot_criteria: Sequence[Criterion],
    crazy_criteria: Sequence[Criterion],
    default_score: float = DEFAULT_SCORE,
    normalized: bool = True,
) -> ScoreResult:
    """Compute both category scores for one person and classify the point."""
    hot = category_score(scores, hot_criteria, default_score, normalized)
    crazy = category_score(scores, crazy_criteria, default_score, normalized)
    return ScoreResult(hot_score=hot, crazy_score=crazy, zone=classify_zone(hot, crazy))
