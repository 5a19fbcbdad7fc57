import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables
repo_root = Path(__file__).resolve().parents[1]
environment = os.getenv("ENVIRONMENT", "development")
env_file = repo_root / f".env.{environment}"
if env_file.exists():
    load_dotenv(env_file, override=True)
else:
    env_path = repo_root / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=True)
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer. Using default {default}.")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not a number. Using default {default}.")
        return default


class Config:
    ENVIRONMENT = environment
    PORT = _env_int("PORT", 3001)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Provider credentials. Placeholders keep startup working; calls made
    # with them fail upstream and are answered with fallback listings.
    ADZUNA_APP_ID = os.getenv("ADZUNA_APP_ID") or "your_adzuna_app_id"
    ADZUNA_APP_KEY = os.getenv("ADZUNA_APP_KEY") or "your_adzuna_app_key"
    ADZUNA_COUNTRY = os.getenv("ADZUNA_COUNTRY", "gb").strip().lower() or "gb"
    REED_API_KEY = os.getenv("REED_API_KEY") or "your_reed_api_key"
    USAJOBS_API_KEY = os.getenv("USAJOBS_API_KEY") or "your_usajobs_api_key"
    USAJOBS_USER_AGENT = os.getenv("USAJOBS_USER_AGENT") or "JobSearchApp/1.0"

    PROVIDER_REQUEST_TIMEOUT = _env_float("PROVIDER_REQUEST_TIMEOUT", 30.0)

    # Rate limiting: RATE_LIMIT_POINTS requests per RATE_LIMIT_DURATION seconds per client IP
    RATE_LIMIT_POINTS = _env_int("RATE_LIMIT_POINTS", 10)
    RATE_LIMIT_DURATION = _env_int("RATE_LIMIT_DURATION", 60)
    RATE_LIMIT_EXEMPT_PATHS = {"/api/health"}

    # CORS configuration: allow-all unless origins are given (comma-separated)
    _cors_env = os.getenv("CORS_ORIGINS", "").strip()
    CORS_ORIGINS = (
        [o.strip() for o in _cors_env.split(",") if o.strip()] if _cors_env else "*"
    )
