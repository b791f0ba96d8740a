from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from eventlist.envelope import envelope_for, resolve_mode

bp = Blueprint("api_events", __name__)


@bp.get("/events")
def list_events():
    """
    GET /events?mode=success|fail|error
    Returns the event list, or a canned fail/error envelope for the given mode.
    """
    selection = resolve_mode(request.args.get("mode"))
    body, status = envelope_for(selection, current_app.extensions["event_store"])
    return jsonify(body), status
