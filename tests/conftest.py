import os
import pytest
import requests

os.environ.setdefault("FLASK_ENV", "testing")

from eventlist import create_app  # noqa: E402
from eventlist.store import EventStore  # noqa: E402

SAMPLE_EVENTS = [
    {"id": 1, "name": "Spring Festival", "date": "2025-06-01"},
    {"id": 2, "name": "Tech Conference", "date": "2025-06-10"},
]


class _DummyResp:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def json(self):
        if self._text is not None:
            raise ValueError(f"Expecting value: {self._text!r}")
        return self._payload


@pytest.fixture()
def app():
    flask_app = create_app()
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def app_client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture()
def sample_store():
    return EventStore.from_dicts(SAMPLE_EVENTS)


@pytest.fixture()
def sample_client(sample_store):
    flask_app = create_app(store=sample_store)
    flask_app.config.update(TESTING=True)
    with flask_app.test_client() as c:
        yield c


@pytest.fixture
def fake_requests(monkeypatch):
    calls = []

    def install(mapper):
        def _get(url, params=None, timeout=None, **kwargs):
            calls.append({"url": url, "params": params, "timeout": timeout})
            if callable(mapper):
                result = mapper(url, params)
            else:
                result = mapper.get(url, ({}, 200))
            if isinstance(result, Exception):
                raise result
            payload, status = result
            if isinstance(payload, str):
                return _DummyResp(status_code=status, text=payload)
            return _DummyResp(status_code=status, payload=payload)

        monkeypatch.setattr("requests.get", _get, raising=True)
        return calls

    return install


@pytest.fixture
def served_by(fake_requests):
    """Route requests.get through a Flask test client, end to end."""
    def install(client):
        def mapper(url, params):
            path = "/" + url.split("://", 1)[-1].split("/", 1)[1]
            r = client.get(path, query_string=params)
            return r.get_json(), r.status_code
        return fake_requests(mapper)
    return install


@pytest.fixture
def connection_refused():
    return requests.ConnectionError("[Errno 111] Connection refused")
