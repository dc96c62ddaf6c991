import logging

import requests

from backend.config import get_jobs_api_url
from backend.schemas import JobSearchRequest, SearchResponsePage

logger = logging.getLogger(__name__)

CONNECTION_ERROR = "Failed to connect to the server. Please try again later."
UNKNOWN_ERROR = "An unknown error occurred"


class ApiError(Exception):
    """A failed call to /api/jobs, carrying the message to show the user."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class JobsApiClient:
    """Talks to the /api/jobs proxy on behalf of the UI."""

    def __init__(self, base_url=None, session=None, timeout=None):
        self.base_url = (base_url or get_jobs_api_url()).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def search(self, keywords, industry=None, token=None, location=None) -> SearchResponsePage:
        """
        The UI folds locations into keywords and never passes location;
        it is accepted for callers hitting the proxy filter directly.
        """
        request = JobSearchRequest(
            keywords=keywords,
            location=location,
            industry=industry,
            token=token,
        )

        try:
            r = self.session.get(
                f"{self.base_url}/api/jobs",
                params=request.to_query_params(),
                timeout=self.timeout,
            )
            data = r.json()
        except (requests.exceptions.RequestException, ValueError):
            logger.exception("Failed to fetch jobs")
            raise ApiError(CONNECTION_ERROR)

        if not r.ok:
            message = data.get("error") if isinstance(data, dict) else None
            raise ApiError(message or UNKNOWN_ERROR, status_code=r.status_code)

        if not isinstance(data, dict):
            raise ApiError(UNKNOWN_ERROR, status_code=r.status_code)

        try:
            return SearchResponsePage.from_payload(data)
        except ValueError:
            logger.exception("Unexpected /api/jobs payload")
            raise ApiError(UNKNOWN_ERROR, status_code=r.status_code)
