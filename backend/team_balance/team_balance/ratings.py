import math
from typing import Iterable, Sequence

from .config import Config
from .types import Player


def rank_weights(team_size: int, cfg: Config) -> list[float]:
    return [max(cfg.min_weight, 1.0 - i * cfg.weight_step) for i in range(team_size)]


def aggregate_rating(ratings: Sequence[float], team_size: int, cfg: Config) -> int:
    """Weighted team rating from member ratings.

    Ratings are ranked highest first and the i-th one is weighted by
    ``1 - i * weight_step``, floored at ``min_weight`` so the result stays
    between the lowest and highest counted rating for any roster size. Short
    rosters are padded with the baseline rating so previews of partial teams
    stay deterministic. An empty input gives 0; callers should not rely on
    that value.
    """
    if team_size < 1:
        raise ValueError("team_size must be a positive integer")
    if not ratings:
        return 0
    ranked = sorted(ratings, reverse=True)
    while len(ranked) < team_size:
        ranked.append(cfg.baseline_rating)
    ranked = ranked[:team_size]

    weights = rank_weights(team_size, cfg)
    total_weight = sum(weights)
    weighted_sum = sum(rating * weight for rating, weight in zip(ranked, weights))
    # half-up, not banker's rounding
    return math.floor(weighted_sum / total_weight + 0.5)


def roster_rating(ratings: Sequence[float], team_size: int, cfg: Config) -> float:
    top = sorted(ratings, reverse=True)[:team_size]
    total = sum(top)
    return total or cfg.default_individual_rating * team_size


def team_sum(players: Iterable[Player]) -> float:
    return sum(p.rating for p in players)
