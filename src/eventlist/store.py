from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from eventlist import config


@dataclass(frozen=True)
class Event:
    id: int
    name: str
    date: str  # YYYY-MM-DD

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Event":
        return cls(id=int(raw["id"]), name=str(raw["name"]), date=str(raw["date"]))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class EventStore:
    """
    Ordered, read-only collection of events. Built once; there is no write path.
    """

    def __init__(self, events: Iterable[Event]):
        items = tuple(events)
        seen = set()
        for ev in items:
            if ev.id <= 0:
                raise ValueError(f"event id must be positive: {ev.id}")
            if ev.id in seen:
                raise ValueError(f"duplicate event id: {ev.id}")
            seen.add(ev.id)
        self._events: Tuple[Event, ...] = items

    @classmethod
    def from_dicts(cls, rows: Iterable[Dict[str, Any]]) -> "EventStore":
        return cls(Event.from_dict(r) for r in rows)

    def all(self) -> Tuple[Event, ...]:
        return self._events

    def __len__(self) -> int:
        return len(self._events)


_DEFAULT: Optional[EventStore] = None


def default_store() -> EventStore:
    global _DEFAULT
    if _DEFAULT is not None:
        return _DEFAULT
    _DEFAULT = EventStore.from_dicts(config.EVENTS)
    return _DEFAULT
