import os

from dotenv import load_dotenv

# Process environment wins over .env
load_dotenv(os.path.join(os.getcwd(), ".env"), override=False)


def _database_url() -> str:
    url = (os.environ.get("CONNECTION_STRING") or os.environ.get("DATABASE_URL") or "").strip()
    if not url:
        # Default to local SQLite for dev/tests
        return "sqlite:///./usertodo.db"
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


def _flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = _database_url()

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 5000))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# When false, store failures are reported with a generic message per error kind
EXPOSE_STORE_ERRORS = _flag("EXPOSE_STORE_ERRORS", True)
