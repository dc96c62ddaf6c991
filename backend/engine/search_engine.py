from backend.config import (
    RESULTS_PER_PAGE,
    SEARCHAPI_ENGINE,
    get_api_key,
)
from backend.engine.fetchers import fetch_google_jobs
from backend.errors import ValidationError
from backend.utils.helpers import clean_text


# =========================================================
# UPSTREAM QUERY
# =========================================================
def build_upstream_params(api_key, q, location=None, industry=None, token=None):
    """
    SearchAPI treats next_page_token as carrying the original query
    context, so location/industry are only sent on the first page.
    """
    params = {
        "api_key": api_key,
        "q": q,
        "engine": SEARCHAPI_ENGINE,
        "no_cache": "true",
        "num": RESULTS_PER_PAGE,
    }

    if token:
        params["next_page_token"] = token
        return params

    if location:
        params["location"] = location
    if industry:
        params["industry"] = industry

    return params


def run_job_search(q, location=None, industry=None, token=None):
    """
    Single entry point for the /api/jobs proxy.
    Raises a JobSearchError subclass on any failure.
    """
    q = clean_text(q)
    if not q:
        raise ValidationError()

    api_key = get_api_key()

    params = build_upstream_params(
        api_key,
        q,
        location=location,
        industry=industry,
        token=token,
    )

    return fetch_google_jobs(params)
