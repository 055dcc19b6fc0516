from dataclasses import dataclass, field
from typing import List

TEAM_SIZE_LABELS = {"1v1": 1, "2v2": 2, "4v4": 4, "5v5": 5}


def players_per_team(label: str, default: int = 4) -> int:
    return TEAM_SIZE_LABELS.get(label, default)


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    rating: float

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "rating": self.rating}


@dataclass(frozen=True)
class Split:
    team_a: List[Player] = field(default_factory=list)
    team_b: List[Player] = field(default_factory=list)
    rating_a: float = 0.0
    rating_b: float = 0.0

    @property
    def diff(self) -> float:
        return abs(self.rating_a - self.rating_b)

    @property
    def is_empty(self) -> bool:
        return not self.team_a and not self.team_b


@dataclass(frozen=True)
class MatchProposal:
    team_a: List[Player]
    team_b: List[Player]
    rating_a: float
    rating_b: float
    quality: float
    method: str = "exhaustive"  # "exhaustive", "snake" or "manual"

    @property
    def diff(self) -> float:
        return abs(self.rating_a - self.rating_b)

    def to_dict(self) -> dict:
        return {
            "team_a": [p.to_dict() for p in self.team_a],
            "team_b": [p.to_dict() for p in self.team_b],
            "rating_a": self.rating_a,
            "rating_b": self.rating_b,
            "diff": self.diff,
            "quality": self.quality,
            "method": self.method,
        }
