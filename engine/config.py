import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _parse_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %s", name, raw, default)
        return default
    if value < 0:
        logger.warning("Ignoring negative %s=%r, using %s", name, raw, default)
        return default
    return value


JOURNAL_DB_PATH = os.getenv("JOURNAL_DB_PATH", "db/journal.db")
MAX_NOTE_CHARS = _parse_int("MAX_NOTE_CHARS", 500)
MAX_INSIGHTS_CHARS = _parse_int("MAX_INSIGHTS_CHARS", 2000)
MAX_TITLE_CHARS = _parse_int("MAX_TITLE_CHARS", 100)
DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en")
DAILY_SEED_SALT = os.getenv("DAILY_SEED_SALT", "tarot-timer")
LOG_DIR = os.getenv(
    "LOG_DIR", os.path.join(os.path.dirname(os.path.dirname(__file__)), "logs")
)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = _parse_int("API_PORT", 8000)
