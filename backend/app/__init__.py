import logging

from flask import Flask
from flask_cors import CORS

from .config import Config
from .db import SessionLocal, ensure_schema

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = Flask(__name__)
    app.url_map.strict_slashes = False
    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        allow_headers=["Content-Type"],
    )

    from .routes import balance, matches, players, queues

    api_prefix = "/api"
    app.register_blueprint(balance.bp, url_prefix=api_prefix)
    app.register_blueprint(players.bp, url_prefix=f"{api_prefix}/players")
    app.register_blueprint(queues.bp, url_prefix=f"{api_prefix}/queues")
    app.register_blueprint(matches.bp, url_prefix=f"{api_prefix}/matches")

    @app.get("/api/health")
    def healthcheck():
        return {"ok": True}

    @app.teardown_appcontext
    def shutdown_session(_exc=None):
        SessionLocal.remove()

    @app.errorhandler(ValueError)
    def handle_value_error(exc):
        logger.info("rejected request: %s", exc)
        return {"ok": False, "error": str(exc)}, 400

    ensure_schema()

    return app
