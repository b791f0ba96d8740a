from __future__ import annotations

import importlib

API_MODULES = [
    "health",
    "events",
]


def register_api(app):
    # routes are mounted at the root: clients call GET /events directly
    for name in API_MODULES:
        mod_qualname = f"{__name__}.{name}"
        try:
            mod = importlib.import_module(mod_qualname)
        except ImportError as e:
            app.logger.warning("Skipping API module %s: %s", mod_qualname, e)
            continue

        bp = getattr(mod, "bp", None)
        if bp is None:
            app.logger.warning("Module %s has no `bp`; skipping", mod_qualname)
            continue
        app.register_blueprint(bp)
