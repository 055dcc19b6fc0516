import os

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _load_env() -> None:
    candidates = [
        os.path.join(BASE_DIR, ".env"),
        os.path.join(BASE_DIR, "backend", ".env"),
    ]
    for path in candidates:
        if not os.path.exists(path):
            continue
        with open(path, "r", encoding="utf-8") as handle:
            for raw in handle:
                line = raw.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"').strip("'")
                if key and key not in os.environ:
                    os.environ[key] = value


_load_env()


class Config:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///" + os.path.join(BASE_DIR, "matchmaking.db"))
    SQLALCHEMY_ECHO = os.getenv("SQLALCHEMY_ECHO", "0") == "1"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    QUALITY_MAX_GAP = float(os.getenv("QUALITY_MAX_GAP", "400"))
    DEFAULT_TEAM_SIZE = int(os.getenv("DEFAULT_TEAM_SIZE", "4"))
    DEFAULT_RATING = float(os.getenv("DEFAULT_RATING", "800"))
    MAX_EXHAUSTIVE_TEAM_SIZE = int(os.getenv("MAX_EXHAUSTIVE_TEAM_SIZE", "5"))
