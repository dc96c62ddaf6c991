import pytest


class FakeResponse:
    """Stand-in for requests.Response."""

    def __init__(self, status_code=200, json_data=None, text=None):
        self.status_code = status_code
        self._json = json_data
        self._text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json is None:
            raise ValueError(f"No JSON body: {self._text!r}")
        return self._json


class RecordingGet:
    """Replaces requests.get and remembers every call."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeResponse(json_data={"jobs": []})
        self.exc = exc
        self.calls = []

    def __call__(self, url, params=None, **kwargs):
        self.calls.append({"url": url, "params": dict(params or {}), **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response

    @property
    def params(self):
        return self.calls[-1]["params"]


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("SEARCHAPI_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("SEARCHAPI_API_KEY", raising=False)


def make_job(title="Engineer", company="Acme", links=0, **kwargs):
    data = {
        "title": title,
        "company_name": company,
        "location": "Boston, MA",
        "description": "Build things",
        "apply_link": "https://acme.example/apply",
        "apply_links": [
            {"link": f"https://board{i}.example/job", "source": f"Board {i}"}
            for i in range(1, links + 1)
        ],
    }
    data.update(kwargs)
    return data
