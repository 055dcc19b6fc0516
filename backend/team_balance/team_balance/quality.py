from typing import Optional

from .config import Config
from .utils import clamp


def match_quality(rating_a: float, rating_b: float, max_gap: Optional[float] = None, cfg: Optional[Config] = None) -> float:
    """Score how even a pairing is: 1.0 for equal ratings, 0.0 at or past ``max_gap``.

    Both ratings must come from the same aggregation (raw sums or weighted
    averages); the estimator does not care which.
    """
    if max_gap is None:
        max_gap = (cfg or Config()).quality_max_gap
    if max_gap <= 0:
        raise ValueError("max_gap must be positive")
    return clamp(1.0 - abs(rating_a - rating_b) / max_gap, 0.0, 1.0)
