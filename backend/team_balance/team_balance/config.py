from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    baseline_rating: float = 1000.0
    default_individual_rating: float = 800.0

    weight_step: float = 0.2
    min_weight: float = 0.1

    quality_max_gap: float = 400.0

    default_team_size: int = 4
    max_exhaustive_team_size: int = 5
