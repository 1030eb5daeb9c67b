import os
import urllib.parse


def database_uri() -> str:
    """DATABASE_URL wins; otherwise build a MySQL URI from the DB_* variables."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    user = os.getenv("DB_USER", "root")
    # quote_plus keeps characters like '@' in the password from breaking the URI
    password = urllib.parse.quote_plus(os.getenv("DB_PASSWORD", ""))
    host = os.getenv("DB_HOST", "localhost")
    port = int(os.getenv("DB_PORT", "3306"))
    name = os.getenv("DB_NAME", "shift_logger")
    return f"mysql+mysqlconnector://{user}:{password}@{host}:{port}/{name}"


API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "10"))

SQLALCHEMY_TRACK_MODIFICATIONS = False
