import logging
import os

from backend.errors import ConfigurationError

logger = logging.getLogger(__name__)

# =========================================================
# REQUIRED ENV VARS (names only)
# =========================================================
REQUIRED_ENV_VARS = [
    "SEARCHAPI_API_KEY",
]

# =========================================================
# CONSTANT ENDPOINTS
# =========================================================
SEARCHAPI_URL = "https://www.searchapi.io/api/v1/search"
SEARCHAPI_ENGINE = "google_jobs"
RESULTS_PER_PAGE = 100

DEFAULT_JOBS_API_URL = "http://localhost:8000"
DEFAULT_MAX_ALTERNATE_LINKS = 20


# =========================================================
# SAFETY CHECK (warn at startup, fail per request)
# =========================================================
def validate_env():
    missing = []

    for key in REQUIRED_ENV_VARS:
        if not os.getenv(key):
            missing.append(key)

    if missing:
        logger.warning(
            "Missing required environment variables: %s", ", ".join(missing)
        )

    return missing


def get_api_key() -> str:
    api_key = os.getenv("SEARCHAPI_API_KEY")
    if not api_key:
        raise ConfigurationError()
    return api_key


def get_upstream_timeout():
    """Seconds to wait on SearchAPI, or None to leave it to the transport."""
    raw = os.getenv("SEARCHAPI_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric SEARCHAPI_TIMEOUT=%r", raw)
        return None


def get_jobs_api_url() -> str:
    return os.getenv("JOBS_API_URL", DEFAULT_JOBS_API_URL).rstrip("/")


def get_max_alternate_links() -> int:
    raw = os.getenv("EXPORT_MAX_ALTERNATE_LINKS")
    if not raw:
        return DEFAULT_MAX_ALTERNATE_LINKS
    try:
        return max(int(raw), 0)
    except ValueError:
        logger.warning("Ignoring non-integer EXPORT_MAX_ALTERNATE_LINKS=%r", raw)
        return DEFAULT_MAX_ALTERNATE_LINKS
