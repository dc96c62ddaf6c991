import logging

import requests

from backend.config import SEARCHAPI_URL, get_upstream_timeout
from backend.errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)


# =========================================================
# SEARCHAPI (GOOGLE JOBS)
# =========================================================
def upstream_error_message(response):
    """
    Pull the error text out of a failed SearchAPI response.
    Returns None when the body is not the expected error shape.
    """
    try:
        body = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None

    for key in ("message", "error"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def fetch_google_jobs(params):
    """
    One GET against SearchAPI. Returns the decoded JSON body untouched.
    """
    safe_params = {k: v for k, v in params.items() if k != "api_key"}
    logger.info("SearchAPI request: %s %s", SEARCHAPI_URL, safe_params)

    try:
        r = requests.get(
            SEARCHAPI_URL,
            params=params,
            timeout=get_upstream_timeout()
        )
    except requests.exceptions.RequestException:
        logger.exception("Error fetching from SearchAPI")
        raise TransportError()

    if not r.ok:
        message = upstream_error_message(r)
        logger.warning(
            "SearchAPI returned %s: %s", r.status_code, message or "<unparseable body>"
        )
        raise UpstreamError(message, status_code=r.status_code)

    try:
        return r.json()
    except ValueError:
        logger.exception("SearchAPI returned a non-JSON body")
        raise TransportError()
