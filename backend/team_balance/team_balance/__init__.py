from .config import Config
from .quality import match_quality
from .ranks import RankTier, rank_for_rating, rank_progress
from .ratings import aggregate_rating, roster_rating
from .teamgen import balance_teams, evaluate_split, propose_match, snake_draft
from .types import MatchProposal, Player, Split, players_per_team

__all__ = [
    "Config",
    "MatchProposal",
    "Player",
    "RankTier",
    "Split",
    "aggregate_rating",
    "balance_teams",
    "evaluate_split",
    "match_quality",
    "players_per_team",
    "propose_match",
    "rank_for_rating",
    "rank_progress",
    "roster_rating",
    "snake_draft",
]
