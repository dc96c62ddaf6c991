from backend.schemas import JobResult, SearchResponsePage
from conftest import make_job
from ui.accumulator import SearchSession, SearchStatus, load_more, new_search
from ui.api_client import ApiError


def page(titles, token=None):
    return SearchResponsePage(
        jobs=[JobResult(**make_job(title=t)) for t in titles],
        next_page_token=token,
    )


class FakeClient:
    """Hands out queued pages (or raises queued errors) and records calls."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []
        self.seen_results = []
        self.session = None

    def search(self, keywords, industry=None, token=None, location=None):
        self.calls.append({
            "keywords": keywords,
            "industry": industry,
            "token": token,
            "location": location,
        })
        if self.session is not None:
            self.seen_results.append(list(self.session.results))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def titles(session):
    return [j.title for j in session.results]


def test_new_search_composes_location_clause():
    client = FakeClient(page(["A"]))
    new_search(client, SearchSession(), "nurse", location="Boston, Cambridge")

    assert client.calls[0]["keywords"] == 'nurse in "Boston" or "Cambridge"'
    assert client.calls[0]["token"] is None


def test_new_search_sends_industry_separately():
    client = FakeClient(page(["A"]))
    new_search(client, SearchSession(), "nurse", industry="Healthcare")

    assert client.calls[0]["keywords"] == "nurse"
    assert client.calls[0]["industry"] == "Healthcare"


def test_new_search_clears_results_before_request_resolves():
    session = SearchSession(results=[JobResult(**make_job(title="old"))], next_page_token="t")
    client = FakeClient(page(["new"]))
    client.session = session

    new_search(client, session, "nurse")

    assert client.seen_results == [[]]


def test_new_search_replaces_results():
    client = FakeClient(page(["A", "B"], token="t1"), page(["C"]))
    session = new_search(client, SearchSession(), "nurse")
    assert titles(session) == ["A", "B"]
    assert session.next_page_token == "t1"

    session = new_search(client, session, "doctor")
    assert titles(session) == ["C"]
    assert session.next_page_token is None
    assert session.status == SearchStatus.IDLE


def test_new_search_failure_leaves_results_empty():
    session = SearchSession(results=[JobResult(**make_job(title="old"))])
    client = FakeClient(ApiError("Error from SearchAPI"))

    new_search(client, session, "nurse")

    assert session.results == []
    assert session.status == SearchStatus.ERROR
    assert session.error == "Error from SearchAPI"


def test_load_more_appends_and_sends_token_with_original_keywords():
    client = FakeClient(page(["A", "B"], token="page-2"), page(["C", "D"]))
    session = new_search(
        client, SearchSession(), "nurse", location="Boston, Cambridge", industry="Healthcare"
    )

    load_more(client, session)

    second = client.calls[1]
    assert second["token"] == "page-2"
    assert second["keywords"] == 'nurse in "Boston" or "Cambridge"'
    assert second["industry"] is None
    assert second["location"] is None
    assert titles(session) == ["A", "B", "C", "D"]
    assert session.next_page_token is None
    assert not session.can_load_more


def test_load_more_replaces_token():
    client = FakeClient(page(["A"], token="t2"), page(["B"], token="t3"))
    session = new_search(client, SearchSession(), "nurse")
    load_more(client, session)
    assert session.next_page_token == "t3"


def test_load_more_without_token_is_noop():
    client = FakeClient(page(["A"]))
    session = new_search(client, SearchSession(), "nurse")

    load_more(client, session)

    assert len(client.calls) == 1
    assert titles(session) == ["A"]
    assert session.status == SearchStatus.IDLE


def test_load_more_failure_keeps_existing_results():
    client = FakeClient(page(["A"], token="t2"), ApiError("Failed to connect"))
    session = new_search(client, SearchSession(), "nurse")

    load_more(client, session)

    assert titles(session) == ["A"]
    assert session.status == SearchStatus.ERROR
    assert session.error == "Failed to connect"
    assert session.can_load_more


def test_load_more_retry_after_failure_clears_error():
    client = FakeClient(page(["A"], token="t2"), ApiError("boom"), page(["B"]))
    session = new_search(client, SearchSession(), "nurse")
    load_more(client, session)
    load_more(client, session)

    assert session.error is None
    assert titles(session) == ["A", "B"]


def test_no_transitions_while_loading():
    session = SearchSession(status=SearchStatus.SEARCHING, next_page_token="t")
    client = FakeClient()

    new_search(client, session, "nurse")
    load_more(client, session)

    assert client.calls == []
    assert not session.can_load_more


def test_can_export_tracks_results():
    session = SearchSession()
    assert not session.can_export
    session.results = [JobResult(**make_job())]
    assert session.can_export
