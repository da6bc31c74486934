import os
import logging
from pathlib import Path
from dotenv import load_dotenv

"""Handles environment variables, constants, and logger setup."""

load_dotenv()

# ── Logging Setup ──────────────────────────────────────────
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("AlumniSite")

# Suppress noisy loggers
for _noisy in ("werkzeug.serving", "urllib3"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)


def _int_env(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}, using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name} must be positive, using {default}")
        return default
    return value


def _float_env(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}, using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name} must be positive, using {default}")
        return default
    return value


# ── Paths ──────────────────────────────────────────────────
BACKEND_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_PATH = BACKEND_DIR / 'data' / 'alumni.json'
ALUMNI_DATA_PATH = Path(os.getenv('ALUMNI_DATA_PATH') or DEFAULT_DATA_PATH)

# ── App settings ───────────────────────────────────────────
SECRET_KEY = os.getenv('SECRET_KEY', 'default_secret_key')
PAGE_SIZE = _int_env('PAGE_SIZE', 25)
CAROUSEL_INTERVAL = _float_env('CAROUSEL_INTERVAL', 3.0)
API_MAX_LIMIT = 500

# Course options shown in the directory selector ("" means all courses)
COURSE_OPTIONS = ["MCA", "PhD", "B.Tech", "M.Tech"]

DEFAULT_ALUMNI_IMAGE = '/images/user.svg'
