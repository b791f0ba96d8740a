from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

import requests


class TransportError(RuntimeError):
    """The server was unreachable or answered with an unparseable body."""


class Transport(Protocol):
    def get_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        ...


class RequestsTransport:
    """
    GET + JSON decode on top of `requests`.

    Non-2xx answers are returned as parsed JSON like any other: the envelope's
    `status` field, not the HTTP code, tells the caller what happened.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session
        self.timeout = timeout

    def get_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        get = self.session.get if self.session is not None else requests.get
        try:
            r = get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}") from e
        try:
            body = r.json()
        except ValueError as e:
            raise TransportError(f"GET {url} returned invalid JSON (status {r.status_code})") from e
        if not isinstance(body, dict):
            raise TransportError(f"GET {url} returned {type(body).__name__}, expected an object")
        return body
