from datetime import datetime

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base


Base = declarative_base()


class Player(Base):
    __tablename__ = "players"
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class PlayerRating(Base):
    __tablename__ = "player_ratings"
    player_id = Column(String, ForeignKey("players.id"), primary_key=True)
    team_size = Column(Integer, primary_key=True)
    rating = Column(Float, nullable=False)
    wins = Column(Integer, nullable=False, default=0)
    losses = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class Queue(Base):
    __tablename__ = "queues"
    id = Column(Integer, primary_key=True)
    team_size = Column(Integer, nullable=False)
    status = Column(String, nullable=False, default="open")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class QueueEntry(Base):
    __tablename__ = "queue_entries"
    __table_args__ = (UniqueConstraint("queue_id", "player_id"),)
    id = Column(Integer, primary_key=True)
    queue_id = Column(Integer, ForeignKey("queues.id"), nullable=False)
    player_id = Column(String, ForeignKey("players.id"), nullable=False)
    joined_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class Match(Base):
    __tablename__ = "matches"
    id = Column(Integer, primary_key=True)
    queue_id = Column(Integer, ForeignKey("queues.id"), nullable=True)
    team_size = Column(Integer, nullable=False)
    status = Column(String, nullable=False, default="pending")
    teams_json = Column(JSON, nullable=False)
    quality = Column(Float, nullable=False)
    method = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
