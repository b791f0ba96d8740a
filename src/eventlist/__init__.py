from __future__ import annotations

from typing import Optional

from flask import Flask
from flask_cors import CORS

from eventlist import config
from eventlist.store import EventStore, default_store


def create_app(store: Optional[EventStore] = None) -> Flask:
    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.SECRET_KEY
    # keep envelope keys in insertion order: status first, then data/message
    app.json.sort_keys = False
    CORS(app, origins=config.CORS_ORIGINS)

    app.extensions["event_store"] = store if store is not None else default_store()

    from eventlist.api import register_api
    register_api(app)

    from eventlist.web import register_web
    register_web(app)

    app.logger.info("[create_app] serving %d events", len(app.extensions["event_store"]))
    return app
