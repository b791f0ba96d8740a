"""
Mode selection and the {status, data|message} response envelope.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Union

from eventlist.store import EventStore

FAIL_MESSAGE = "Bad request while fetching events."
ERROR_MESSAGE = "Internal server error while fetching events."


class Mode(Enum):
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


@dataclass(frozen=True)
class Unrecognized:
    raw: str


Selection = Union[Mode, Unrecognized]


def resolve_mode(raw: Optional[str]) -> Selection:
    # absent -> success; present-but-empty is just another unknown value
    if raw is None:
        return Mode.SUCCESS
    try:
        return Mode(raw)
    except ValueError:
        return Unrecognized(raw)


def success(store: EventStore) -> Dict[str, Any]:
    return {"status": "success", "data": [ev.to_dict() for ev in store.all()]}


def fail(message: str) -> Dict[str, Any]:
    return {"status": "fail", "message": message}


def error(message: str) -> Dict[str, Any]:
    return {"status": "error", "message": message}


# one entry per Mode member
RESPONSES: Dict[Mode, Tuple[Callable[[EventStore], Dict[str, Any]], int]] = {
    Mode.SUCCESS: (success, 200),
    Mode.FAIL: (lambda store: fail(FAIL_MESSAGE), 400),
    Mode.ERROR: (lambda store: error(ERROR_MESSAGE), 500),
}


def envelope_for(selection: Selection, store: EventStore) -> Tuple[Dict[str, Any], int]:
    """
    Returns (body, http_status) for a resolved mode.

    Unknown modes answer HTTP 200 with a `fail` body; clients are expected to
    trust the body's status over the HTTP code.
    """
    if isinstance(selection, Unrecognized):
        return fail(f"Invalid mode: {selection.raw}"), 200
    respond, http_status = RESPONSES[selection]
    return respond(store), http_status
