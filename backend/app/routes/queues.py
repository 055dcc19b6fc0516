import logging

from flask import Blueprint

from ..db import get_db
from ..models import Player, Queue, QueueEntry
from ..services.matchmaking import launch_queue, match_payload, queue_entries, queue_payload
from ..utils import err, json_body, ok

bp = Blueprint("queues", __name__, url_prefix="/queues")

logger = logging.getLogger(__name__)


def _get_queue(db, queue_id: int) -> Queue | None:
    return db.query(Queue).filter_by(id=queue_id).one_or_none()


@bp.post("")
def create_queue():
    data = json_body()
    team_size = data.get("team_size")
    if not isinstance(team_size, int) or isinstance(team_size, bool) or team_size < 1:
        return err("invalid_team_size")
    db = get_db()
    queue = Queue(team_size=team_size, status="open")
    db.add(queue)
    db.commit()
    return ok({"queue": queue_payload(db, queue)}, 201)


@bp.get("/<int:queue_id>")
def get_queue(queue_id: int):
    db = get_db()
    queue = _get_queue(db, queue_id)
    if queue is None:
        return err("queue_not_found", 404)
    return ok({"queue": queue_payload(db, queue)})


@bp.post("/<int:queue_id>/join")
def join_queue(queue_id: int):
    player_id = str(json_body().get("player_id") or "")
    db = get_db()
    queue = _get_queue(db, queue_id)
    if queue is None:
        return err("queue_not_found", 404)
    if db.query(Player).filter_by(id=player_id).one_or_none() is None:
        return err("player_not_found", 404)
    if db.query(QueueEntry).filter_by(queue_id=queue_id, player_id=player_id).one_or_none():
        return err("already_in_queue", 409)

    entries = queue_entries(db, queue_id)
    if len(entries) >= queue.team_size * 2:
        return err("queue_full", 409)
    db.add(QueueEntry(queue_id=queue_id, player_id=player_id))
    if len(entries) + 1 >= queue.team_size * 2:
        queue.status = "full"
    db.commit()
    logger.debug("player %s joined queue %s", player_id, queue_id)
    return ok({"queue": queue_payload(db, queue)})


@bp.post("/<int:queue_id>/leave")
def leave_queue(queue_id: int):
    player_id = str(json_body().get("player_id") or "")
    db = get_db()
    queue = _get_queue(db, queue_id)
    if queue is None:
        return err("queue_not_found", 404)
    entry = db.query(QueueEntry).filter_by(queue_id=queue_id, player_id=player_id).one_or_none()
    if entry is None:
        return err("not_in_queue", 404)
    db.delete(entry)
    queue.status = "open"
    db.commit()
    return ok({"queue": queue_payload(db, queue)})


@bp.post("/<int:queue_id>/launch")
def launch(queue_id: int):
    db = get_db()
    queue = _get_queue(db, queue_id)
    if queue is None:
        return err("queue_not_found", 404)
    match = launch_queue(db, queue)
    if match is None:
        return err("not_enough_players", 409)
    return ok({"match": match_payload(match)}, 201)
