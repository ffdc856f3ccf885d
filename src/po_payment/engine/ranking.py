"""Ranking of complete assignments: more discount first, then more points."""
from typing import NamedTuple


class SolutionScore(NamedTuple):
    total_discount: int  # cents
    total_points: int  # cents


def is_better(candidate: SolutionScore, incumbent: SolutionScore | None) -> bool:
    """True when candidate should replace incumbent as the best solution.

    Strict tuple comparison: on a full tie the incumbent (found first) stays,
    which keeps the choice deterministic for identical input.
    """
    if incumbent is None:
        return True
    return candidate > incumbent
