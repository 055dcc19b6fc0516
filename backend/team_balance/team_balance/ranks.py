from dataclasses import dataclass

from .utils import clamp


@dataclass(frozen=True)
class RankTier:
    name: str
    min: float
    max: float


RANKS = [
    RankTier("Obsidian", 2300, 9999),
    RankTier("Diamond", 1900, 2299),
    RankTier("Platinum", 1500, 1899),
    RankTier("Gold", 1200, 1499),
    RankTier("Silver", 900, 1199),
    RankTier("Bronze", 0, 899),
]

_TOP_TIER = RANKS[0].name


def rank_for_rating(rating: float) -> RankTier:
    for tier in RANKS:
        if rating >= tier.min:
            return tier
    return RANKS[-1]


def rank_progress(rating: float, tier_name: str) -> float:
    tier = next((t for t in RANKS if t.name == tier_name), None)
    if tier is None:
        return 0.0
    if tier.name == _TOP_TIER:
        return 100.0
    progress = (rating - tier.min) / (tier.max - tier.min) * 100
    return clamp(progress, 0.0, 100.0)
