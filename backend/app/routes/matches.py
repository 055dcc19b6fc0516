from flask import Blueprint

from ..db import get_db
from ..models import Match
from ..services.matchmaking import match_payload
from ..utils import err, ok

bp = Blueprint("matches", __name__, url_prefix="/matches")


@bp.get("/<int:match_id>")
def get_match(match_id: int):
    db = get_db()
    match = db.query(Match).filter_by(id=match_id).one_or_none()
    if match is None:
        return err("match_not_found", 404)
    return ok({"match": match_payload(match)})
