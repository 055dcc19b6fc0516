import logging

from flask import Blueprint

from ..db import get_db
from ..models import Player, PlayerRating
from ..services.matchmaking import player_payload
from ..utils import err, json_body, now_utc, ok

bp = Blueprint("players", __name__, url_prefix="/players")

logger = logging.getLogger(__name__)


def _parse_ratings(raw) -> dict[int, float] | None:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        return None
    ratings = {}
    for key, value in raw.items():
        try:
            team_size = int(key)
            rating = float(value)
        except (TypeError, ValueError):
            return None
        if team_size < 1:
            return None
        ratings[team_size] = rating
    return ratings


@bp.post("")
def upsert_player():
    data = json_body()
    player_id = str(data.get("id") or "").strip()
    name = str(data.get("name") or "").strip()
    if not player_id or not name:
        return err("id_and_name_required")
    ratings = _parse_ratings(data.get("ratings"))
    if ratings is None:
        return err("invalid_ratings")

    db = get_db()
    player = db.query(Player).filter_by(id=player_id).one_or_none()
    created = player is None
    if created:
        player = Player(id=player_id, name=name)
        db.add(player)
    else:
        player.name = name

    for team_size, rating in ratings.items():
        record = db.query(PlayerRating).filter_by(player_id=player_id, team_size=team_size).one_or_none()
        if record is None:
            db.add(PlayerRating(player_id=player_id, team_size=team_size, rating=rating))
        else:
            record.rating = rating
            record.updated_at = now_utc()
    db.commit()
    logger.debug("player %s %s", player_id, "created" if created else "updated")
    return ok({"player": player_payload(db, player)}, 201 if created else 200)


@bp.get("/<player_id>")
def get_player(player_id: str):
    db = get_db()
    player = db.query(Player).filter_by(id=player_id).one_or_none()
    if player is None:
        return err("player_not_found", 404)
    return ok({"player": player_payload(db, player)})
