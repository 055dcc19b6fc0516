import logging

from team_balance import Config as TeamConfig
from team_balance import Player as TeamPlayer
from team_balance import propose_match, rank_for_rating
from team_balance.utils import mean

from ..config import Config
from ..models import Match, Player, PlayerRating, Queue, QueueEntry

logger = logging.getLogger(__name__)


def team_config() -> TeamConfig:
    return TeamConfig(
        default_individual_rating=Config.DEFAULT_RATING,
        quality_max_gap=Config.QUALITY_MAX_GAP,
        default_team_size=Config.DEFAULT_TEAM_SIZE,
        max_exhaustive_team_size=Config.MAX_EXHAUSTIVE_TEAM_SIZE,
    )


def rating_for(db, player_id: str, team_size: int) -> float:
    record = db.query(PlayerRating).filter_by(player_id=player_id, team_size=team_size).one_or_none()
    if record is None:
        return Config.DEFAULT_RATING
    return record.rating


def queue_entries(db, queue_id: int) -> list[QueueEntry]:
    return (
        db.query(QueueEntry)
        .filter_by(queue_id=queue_id)
        .order_by(QueueEntry.id.asc())
        .all()
    )


def build_pool(db, queue: Queue) -> list[TeamPlayer]:
    entries = queue_entries(db, queue.id)
    players = {p.id: p for p in db.query(Player).filter(Player.id.in_([e.player_id for e in entries])).all()}
    pool = []
    for entry in entries:
        player = players[entry.player_id]
        pool.append(TeamPlayer(id=player.id, name=player.name, rating=rating_for(db, player.id, queue.team_size)))
    return pool


def launch_queue(db, queue: Queue) -> Match | None:
    pool = build_pool(db, queue)
    proposal = propose_match(pool, queue.team_size, team_config())
    if proposal is None:
        logger.info("queue %s: %d players, need %d", queue.id, len(pool), queue.team_size * 2)
        return None

    teams = proposal.to_dict()
    teams["average_a"] = mean(p.rating for p in proposal.team_a)
    teams["average_b"] = mean(p.rating for p in proposal.team_b)
    match = Match(
        queue_id=queue.id,
        team_size=queue.team_size,
        teams_json=teams,
        quality=proposal.quality,
        method=proposal.method,
    )
    db.add(match)
    db.query(QueueEntry).filter_by(queue_id=queue.id).delete()
    queue.status = "open"
    db.commit()
    logger.info(
        "queue %s launched match %s (%s, diff %.0f, quality %.2f)",
        queue.id,
        match.id,
        proposal.method,
        proposal.diff,
        proposal.quality,
    )
    return match


def player_payload(db, player: Player) -> dict:
    ratings = db.query(PlayerRating).filter_by(player_id=player.id).order_by(PlayerRating.team_size.asc()).all()
    return {
        "id": player.id,
        "name": player.name,
        "ratings": [
            {
                "team_size": r.team_size,
                "rating": r.rating,
                "wins": r.wins,
                "losses": r.losses,
                "rank": rank_for_rating(r.rating).name,
            }
            for r in ratings
        ],
    }


def queue_payload(db, queue: Queue) -> dict:
    entries = queue_entries(db, queue.id)
    return {
        "id": queue.id,
        "team_size": queue.team_size,
        "status": queue.status,
        "players": [e.player_id for e in entries],
        "required": queue.team_size * 2,
    }


def match_payload(match: Match) -> dict:
    return {
        "id": match.id,
        "queue_id": match.queue_id,
        "team_size": match.team_size,
        "status": match.status,
        "teams": match.teams_json,
        "quality": match.quality,
        "method": match.method,
    }
