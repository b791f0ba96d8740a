"""
Server-free model of the page's `#eventTable tbody`.

Rows are kept as structured elements rather than HTML strings; markup is only
produced by `to_html()`, through an autoescaping Jinja2 template.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Sequence, Union

from jinja2 import Environment

from eventlist.store import Event

Notify = Callable[[str], None]

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)
_TBODY = _env.from_string(
    """<tbody>
{% for row in rows %}
<tr><td>{{ row.name }}</td><td>{{ row.date }}</td><td><button class="action-btn" data-id="{{ row.button.data['id'] }}">{{ row.button.label }}</button></td></tr>
{% endfor %}
</tbody>"""
)


@dataclass
class Button:
    label: str
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Row:
    name: str
    date: str
    button: Button


def _as_event(ev: Union[Event, Mapping[str, Any]]) -> Event:
    return ev if isinstance(ev, Event) else Event.from_dict(dict(ev))


def handle_action(button: Button, notify: Notify) -> None:
    # read off the clicked button itself, so a re-render can never leave a stale id
    notify(f"You clicked on event ID: {button.data['id']}")


class EventTable:
    def __init__(self):
        self.rows: List[Row] = []

    def render(self, events: Sequence[Union[Event, Mapping[str, Any]]]) -> None:
        rows = []
        for ev in map(_as_event, events):
            rows.append(Row(name=ev.name, date=ev.date, button=Button("Action", {"id": ev.id})))
        self.rows = rows

    def click(self, index: int, notify: Notify) -> None:
        handle_action(self.rows[index].button, notify)

    def to_html(self) -> str:
        return _TBODY.render(rows=self.rows)
