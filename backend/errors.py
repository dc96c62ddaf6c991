# =========================================================
# ERROR TAXONOMY
# Every failure carries the message and status the API
# returns as {"error": message}.
# =========================================================


class JobSearchError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None, status_code=None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(JobSearchError):
    """Missing or empty required input (user-correctable)."""
    status_code = 400
    message = 'Query parameter "q" is required'


class ConfigurationError(JobSearchError):
    """Server is missing a credential it needs."""
    status_code = 500
    message = "SearchAPI API key not configured"


class UpstreamError(JobSearchError):
    """SearchAPI answered with a non-success status."""
    message = "Error from SearchAPI"


class TransportError(JobSearchError):
    """Could not reach SearchAPI or could not read its answer."""
    status_code = 500
    message = "Internal server error"
