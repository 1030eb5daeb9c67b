from .base import SQLALCHEMY_TRACK_MODIFICATIONS  # noqa: F401

SECRET_KEY = "test-secret"

SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"

DEBUG = False
TESTING = True

AUTO_INIT_DB = True
AUTO_SEED_DB = False

LOG_LEVEL = "WARNING"
LOG_FILE = None

API_BASE_URL = "http://testserver"
API_TIMEOUT_SECONDS = 1.0
