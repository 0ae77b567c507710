"""Confidence scoring for flagged test files.

A fixed table keyed on the number of triggered detectors, so every verdict
can be explained by listing its reasons:

- 3 or more reasons: high
- 2 reasons: medium
- 1 reason: low
- 0 reasons: no verdict (the file is not reported)
"""

from .models import Confidence


CONFIDENCE_RANK: dict[Confidence, int] = {
    Confidence.high: 3,
    Confidence.medium: 2,
    Confidence.low: 1,
}


def score_confidence(reason_count: int) -> Confidence | None:
    """Map a number of triggered detectors to a confidence level."""
    if reason_count >= 3:
        return Confidence.high
    if reason_count == 2:
        return Confidence.medium
    if reason_count == 1:
        return Confidence.low
    return None


def confidence_rank(confidence: Confidence | str) -> int:
    return CONFIDENCE_RANK[Confidence(confidence)]


def meets_threshold(confidence: Confidence | str, minimum: Confidence | str) -> bool:
    """Check if a confidence level is at or above the minimum level."""
    return confidence_rank(confidence) >= confidence_rank(minimum)
