import logging
from itertools import combinations
from typing import List, Optional, Sequence

from .config import Config
from .quality import match_quality
from .ratings import team_sum
from .types import MatchProposal, Player, Split

logger = logging.getLogger(__name__)


def _match_pool(players: Sequence[Player], team_size: int) -> Optional[List[Player]]:
    if team_size < 1:
        raise ValueError("team_size must be a positive integer")
    total = team_size * 2
    if len(players) < total:
        return None
    return list(players[:total])


def balance_teams(players: Sequence[Player], team_size: int) -> Split:
    """Split the first ``2 * team_size`` players into the two most even teams.

    Every size-``team_size`` combination is tried, so the cost is C(2n, n);
    this is meant for n <= 5. Ties keep the first split found. A pool that
    is too small yields an empty split.
    """
    pool = _match_pool(players, team_size)
    if pool is None:
        return Split()

    best: Optional[Split] = None
    for picked in combinations(range(len(pool)), team_size):
        chosen = set(picked)
        team_a = [pool[i] for i in picked]
        team_b = [p for i, p in enumerate(pool) if i not in chosen]
        rating_a = team_sum(team_a)
        rating_b = team_sum(team_b)
        if best is None or abs(rating_a - rating_b) < best.diff:
            best = Split(team_a=team_a, team_b=team_b, rating_a=rating_a, rating_b=rating_b)
    return best


def snake_draft(players: Sequence[Player], team_size: int) -> Split:
    pool = _match_pool(players, team_size)
    if pool is None:
        return Split()

    team_a: List[Player] = []
    team_b: List[Player] = []
    # A, A, B, B, ... until one side is full
    for index, player in enumerate(sorted(pool, key=lambda p: p.rating, reverse=True)):
        if len(team_b) == team_size or (index % 4 < 2 and len(team_a) < team_size):
            team_a.append(player)
        else:
            team_b.append(player)
    return Split(team_a=team_a, team_b=team_b, rating_a=team_sum(team_a), rating_b=team_sum(team_b))


def evaluate_split(team_a: List[Player], team_b: List[Player], cfg: Config) -> MatchProposal:
    if not team_a or not team_b:
        raise ValueError("both teams need at least one player")
    if len(team_a) != len(team_b):
        raise ValueError("teams must have the same number of players")
    overlap = {p.id for p in team_a} & {p.id for p in team_b}
    if overlap:
        raise ValueError(f"players on both teams: {', '.join(sorted(overlap))}")
    rating_a = team_sum(team_a)
    rating_b = team_sum(team_b)
    return MatchProposal(
        team_a=list(team_a),
        team_b=list(team_b),
        rating_a=rating_a,
        rating_b=rating_b,
        quality=match_quality(rating_a, rating_b, cfg.quality_max_gap),
        method="manual",
    )


def propose_match(players: Sequence[Player], team_size: int, cfg: Config) -> Optional[MatchProposal]:
    if team_size <= cfg.max_exhaustive_team_size:
        split = balance_teams(players, team_size)
        method = "exhaustive"
    else:
        logger.info("team size %d above exhaustive limit %d, using snake draft", team_size, cfg.max_exhaustive_team_size)
        split = snake_draft(players, team_size)
        method = "snake"

    if split.is_empty:
        logger.debug("not enough players for %dv%d: %d in pool", team_size, team_size, len(players))
        return None

    return MatchProposal(
        team_a=split.team_a,
        team_b=split.team_b,
        rating_a=split.rating_a,
        rating_b=split.rating_b,
        quality=match_quality(split.rating_a, split.rating_b, cfg.quality_max_gap),
        method=method,
    )
