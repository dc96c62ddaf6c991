"""
Result accumulator for the job search UI.

A SearchSession is the whole client state for one browser session. The
operations below take a session and return it, so nothing is shared between
sessions and Streamlit can keep it in ``st.session_state``.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from backend.schemas import JobResult, SearchResponsePage
from backend.utils.helpers import clean_text, compose_keywords
from ui.api_client import ApiError

logger = logging.getLogger(__name__)


class SearchStatus(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    LOADING_MORE = "loading_more"
    ERROR = "error"


@dataclass
class SearchSession:
    keywords: str = ""
    industry: Optional[str] = None
    results: List[JobResult] = field(default_factory=list)
    next_page_token: Optional[str] = None
    status: SearchStatus = SearchStatus.IDLE
    error: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.status in (SearchStatus.SEARCHING, SearchStatus.LOADING_MORE)

    @property
    def can_load_more(self) -> bool:
        return bool(self.next_page_token) and not self.loading

    @property
    def can_export(self) -> bool:
        return bool(self.results)

    # -------------------------
    # Transitions
    # -------------------------
    def start_search(self, keywords, location=None, industry=None):
        """Reset everything and remember the combined query for this session."""
        self.keywords = compose_keywords(keywords, location)
        self.industry = clean_text(industry) or None
        self.results = []
        self.next_page_token = None
        self.error = None
        self.status = SearchStatus.SEARCHING

    def start_load_more(self) -> bool:
        if not self.can_load_more:
            return False
        self.error = None
        self.status = SearchStatus.LOADING_MORE
        return True

    def receive_page(self, page: SearchResponsePage):
        if self.status == SearchStatus.LOADING_MORE:
            self.results = self.results + list(page.jobs)
        else:
            self.results = list(page.jobs)
        self.next_page_token = page.next_page_token or None
        self.status = SearchStatus.IDLE

    def fail(self, message):
        # a failed load-more keeps what is already on screen
        if self.status == SearchStatus.SEARCHING:
            self.results = []
        self.error = message
        self.status = SearchStatus.ERROR


# =========================================================
# OPERATIONS
# =========================================================
def new_search(client, session, keywords, location=None, industry=None):
    """
    Idle -> Searching -> Idle | Error.
    Location is folded into the keywords; industry is sent as its own field.
    """
    if session.loading:
        logger.info("Ignoring new search while a request is in flight")
        return session

    session.start_search(keywords, location=location, industry=industry)
    logger.info("New search: %r (industry=%r)", session.keywords, session.industry)

    try:
        page = client.search(session.keywords, industry=session.industry)
    except ApiError as e:
        session.fail(e.message)
        return session

    session.receive_page(page)
    logger.info(
        "Search returned %d jobs (more=%s)", len(page.jobs), bool(session.next_page_token)
    )
    return session


def load_more(client, session):
    """
    Idle -> LoadingMore -> Idle | Error.
    Sends the stored token and the session's original keywords only.
    """
    if not session.start_load_more():
        return session

    try:
        page = client.search(session.keywords, token=session.next_page_token)
    except ApiError as e:
        session.fail(e.message)
        return session

    session.receive_page(page)
    logger.info("Loaded %d more jobs (total=%d)", len(page.jobs), len(session.results))
    return session
