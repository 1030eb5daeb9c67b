import os

from .base import API_BASE_URL, API_TIMEOUT_SECONDS, SQLALCHEMY_TRACK_MODIFICATIONS, database_uri  # noqa: F401

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SQLALCHEMY_DATABASE_URI = database_uri()

DEBUG = True

# If enabled, tables are created on startup (CREATE IF NOT EXISTS semantics)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo workers and shifts on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE", "logs/shift-logger.log")
