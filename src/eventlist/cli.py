# src/eventlist/cli.py
from __future__ import annotations

import os
import json
import argparse
import traceback

# ---------------------------
# Commands
# ---------------------------

def cmd_serve(port: int, host: str, debug: bool):
    from eventlist import create_app
    app = create_app()
    app.run(host=host, port=port, debug=debug)


def cmd_events():
    # Pretty-print the event store to verify wiring
    from eventlist.store import default_store
    events = [ev.to_dict() for ev in default_store().all()]
    print(json.dumps({"status": "success", "data": events}, indent=2))


def cmd_fetch(base_url: str | None, mode: str, timeout: float | None) -> None:
    """
    Run the client fetcher against a live server and print the rendered table body.
    Exit status 2 when the answer is not a success envelope (fail, error or transport).
    """
    from eventlist.client import EventTable, RequestsTransport, fetch_events

    table = EventTable()
    outcome = fetch_events(RequestsTransport(timeout=timeout), table.render, base_url=base_url, mode=mode)
    if outcome.status != "success":
        print(f"{outcome.status}: {outcome.message}")
        raise SystemExit(2)
    print(table.to_html())


# ---------------------------
# Parser / main
# ---------------------------

def main(argv=None):
    from eventlist import config

    p = argparse.ArgumentParser(description="Event listing demo CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    # serve
    sp = sub.add_parser("serve", help="Run Flask server")
    sp.add_argument("--port", type=int, default=config.PORT)
    sp.add_argument("--host", default=config.HOST)
    sp.add_argument("--debug", action="store_true")
    sp.set_defaults(func=lambda a: cmd_serve(a.port, a.host, a.debug))

    # events
    ev = sub.add_parser("events", help="Print the event store")
    ev.set_defaults(func=lambda a: cmd_events())

    # fetch
    sf = sub.add_parser("fetch", help="Fetch /events from a running server and print the table body")
    sf.add_argument("--base-url", default=os.getenv("EVENTS_API_BASE"))
    sf.add_argument("--mode", default="success")
    sf.add_argument("--timeout", type=float, default=config.EVENTS_TIMEOUT)
    sf.set_defaults(func=lambda a: cmd_fetch(a.base_url, a.mode, a.timeout))

    args = p.parse_args(argv)
    try:
        args.func(args)
    except SystemExit:
        raise
    except Exception as e:
        # Surface trace on CLI errors
        print("ERROR:", e)
        traceback.print_exc()
        raise SystemExit(1)


if __name__ == "__main__":
    main()
