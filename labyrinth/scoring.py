"""Loop scoring: novelty rewarded, repeats, crossings and u-turns penalized."""

from typing import Sequence

from .directions import count_crossings
from .models import Segment, Turn

UNIQUE_SEGMENT_POINTS = 10
REUSED_SEGMENT_PENALTY = 9
UTURN_PENALTY = 27


def unique_segment_count(path: Sequence[Segment]) -> int:
    return len({segment.directionless for segment in path})


def count_uturns(path: Sequence[Segment]) -> int:
    return sum(1 for a, b in zip(path, path[1:]) if a.turn_to(b) is Turn.UTURN)


def score_breakdown(path: Sequence[Segment]) -> dict:
    """Individual scoring terms for a path"""
    unique = unique_segment_count(path)
    reused = len(path) - unique
    crossings = count_crossings(path)
    uturns = count_uturns(path)
    score = (unique * UNIQUE_SEGMENT_POINTS
             - reused * REUSED_SEGMENT_PENALTY
             - crossings
             - uturns * UTURN_PENALTY)
    return {
        "score": score,
        "length": len(path),
        "unique_segments": unique,
        "reused_segments": reused,
        "crossings": crossings,
        "uturns": uturns,
    }


def score_path(path: Sequence[Segment]) -> tuple[int, int]:
    """Return (score, crossings) for a path"""
    breakdown = score_breakdown(path)
    return breakdown["score"], breakdown["crossings"]
