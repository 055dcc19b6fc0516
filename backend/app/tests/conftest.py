import os
import pathlib
import tempfile

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="matchmaking-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + str(pathlib.Path(_DB_DIR) / "test.db")


@pytest.fixture()
def app():
    from app import create_app
    from app.db import SessionLocal, engine
    from app.models import Base

    application = create_app()
    application.config.update(TESTING=True)
    yield application
    SessionLocal.remove()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def add_player(client):
    def _add(player_id: str, rating: float | None = None, team_size: int = 2, name: str | None = None):
        payload = {"id": player_id, "name": name or player_id}
        if rating is not None:
            payload["ratings"] = {str(team_size): rating}
        response = client.post("/api/players", json=payload)
        assert response.status_code in (200, 201)
        return response.get_json()["player"]

    return _add
