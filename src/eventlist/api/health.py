from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from eventlist import config

bp = Blueprint("api_health", __name__)


@bp.get("/health")
def health():
    return jsonify({
        "status": "ok",
        "env": config.FLASK_ENV,
        "events": len(current_app.extensions["event_store"]),
    })
