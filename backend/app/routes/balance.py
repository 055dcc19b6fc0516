import math

from flask import Blueprint

from team_balance import Player as TeamPlayer
from team_balance import aggregate_rating, evaluate_split, match_quality, propose_match

from ..services.matchmaking import team_config
from ..utils import err, json_body, ok

bp = Blueprint("balance", __name__)


def _team_size(data: dict) -> int:
    value = data.get("team_size", team_config().default_team_size)
    if isinstance(value, bool):
        raise ValueError("team_size must be an integer")
    try:
        team_size = int(value)
    except (TypeError, ValueError):
        raise ValueError("team_size must be an integer") from None
    if team_size < 1:
        raise ValueError("team_size must be a positive integer")
    return team_size


def _number(value, field: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field} must be a number") from None
    if not math.isfinite(number):
        raise ValueError(f"{field} must be finite")
    return number


def _players(raw) -> list[TeamPlayer]:
    if not isinstance(raw, list):
        raise ValueError("players must be a list")
    players = []
    for item in raw:
        if not isinstance(item, dict) or "id" not in item or "rating" not in item:
            raise ValueError("each player needs id and rating")
        players.append(
            TeamPlayer(
                id=str(item["id"]),
                name=str(item.get("name") or item["id"]),
                rating=_number(item["rating"], "rating"),
            )
        )
    return players


@bp.post("/balance")
def balance():
    data = json_body()
    players = _players(data.get("players"))
    proposal = propose_match(players, _team_size(data), team_config())
    if proposal is None:
        return err("not_enough_players", 409)
    return ok({"proposal": proposal.to_dict()})


@bp.post("/balance/evaluate")
def evaluate():
    data = json_body()
    proposal = evaluate_split(_players(data.get("team_a")), _players(data.get("team_b")), team_config())
    return ok({"proposal": proposal.to_dict()})


@bp.post("/quality")
def quality():
    data = json_body()
    if "rating_a" not in data or "rating_b" not in data:
        return err("rating_a_and_rating_b_required")
    rating_a = _number(data["rating_a"], "rating_a")
    rating_b = _number(data["rating_b"], "rating_b")
    max_gap = data.get("max_gap")
    value = match_quality(rating_a, rating_b, _number(max_gap, "max_gap") if max_gap is not None else None, team_config())
    return ok({"quality": value})


@bp.post("/team-rating")
def team_rating():
    data = json_body()
    ratings = data.get("ratings")
    if not isinstance(ratings, list) or not ratings:
        return err("ratings_required")
    values = [_number(r, "ratings") for r in ratings]
    return ok({"rating": aggregate_rating(values, _team_size(data), team_config())})
