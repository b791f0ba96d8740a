from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from eventlist import config
from eventlist.client.transport import Transport, TransportError

logger = logging.getLogger(__name__)

Render = Callable[[List[Dict[str, Any]]], None]


@dataclass
class FetchOutcome:
    status: str  # success | fail | error | transport
    message: Optional[str] = None
    events: List[Dict[str, Any]] = field(default_factory=list)


def fetch_events(
    transport: Transport,
    render: Render,
    base_url: Optional[str] = None,
    mode: str = "success",
) -> FetchOutcome:
    """
    One GET against /events, then dispatch on the envelope's status:
      success   -> render(data)
      fail      -> logged, nothing rendered
      other     -> logged as an error, nothing rendered
    Transport failures, and success bodies whose rows cannot be rendered, are
    caught here and logged with their own wording.
    None of these propagate; on anything but success the table is left as is.
    """
    url = f"{(base_url or config.EVENTS_API_BASE).rstrip('/')}/events"
    try:
        body = transport.get_json(url, params={"mode": mode})
    except TransportError as e:
        logger.error("Error fetching events: %s", e)
        return FetchOutcome(status="transport", message=str(e))

    status = body.get("status")
    if status == "success":
        events = body.get("data") or []
        try:
            render(events)
        except (KeyError, TypeError, ValueError) as e:
            # malformed rows: render swaps rows in only once all are built
            logger.error("Error fetching events: malformed event data: %r", e)
            return FetchOutcome(status="transport", message=f"malformed event data: {e!r}")
        return FetchOutcome(status="success", events=events)
    if status == "fail":
        logger.error("There was a failure: %s", body.get("message"))
        return FetchOutcome(status="fail", message=body.get("message"))
    logger.error("An error occurred: %s", body.get("message"))
    return FetchOutcome(status="error", message=body.get("message"))
