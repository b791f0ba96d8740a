from eventlist.client.fetcher import FetchOutcome, fetch_events
from eventlist.client.table import EventTable, handle_action
from eventlist.client.transport import RequestsTransport, Transport, TransportError

__all__ = [
    "EventTable",
    "FetchOutcome",
    "RequestsTransport",
    "Transport",
    "TransportError",
    "fetch_events",
    "handle_action",
]
